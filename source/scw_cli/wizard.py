# ABOUTME: Interactive wizard behind `scw init`
# ABOUTME: Resolves secret key, zone, region and organization, then saves the profile

"""Init wizard - resolve credentials and defaults, then persist the active profile.

Flow::

    config exists? --yes--> override? --no--> cancelled
          |no                  |yes
          v                    v
    read email or secret key ----secret key----+
          |email                               |
          v                                    |
    read password --> login <--+               |
                        |      | 2FA required  |
                        |      +-- read code   |
                        v                      v
                  zone -> region -> organization -> send usage -> save
                                                                    |
                                              get access key -> save again
"""

import logging
import os
import socket
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from scw_cli.account import AccountClient, LoginRequest
from scw_cli.config import Config
from scw_cli.errors import (
    AccountError,
    ConfigError,
    ConfigNotFoundError,
    ConfigSaveError,
    InitCancelledError,
)
from scw_cli.prompts import Prompter
from scw_cli.validators import (
    CredentialInput,
    classify_credential_input,
    validate_credential_input,
    validate_organization_id,
    validate_two_factor_code,
    validate_zone,
)
from scw_cli.zones import DEFAULT_ZONE, parse_zone, zone_to_region

logger = logging.getLogger(__name__)


@dataclass
class InitArgs:
    """Values for the active profile. Empty fields are prompted for."""

    secret_key: str | None = None
    zone: str | None = None
    region: str | None = None
    organization_id: str | None = None
    send_usage: bool | None = None


@dataclass
class InitResult:
    """Outcome of saving the profile.

    The profile is always saved when a result is returned. ``access_key_error``
    is set when the access key could not be retrieved afterwards.
    """

    config: Config
    access_key_error: AccountError | None = None

    @property
    def partial(self) -> bool:
        return self.access_key_error is not None


def login_description() -> str:
    """Describe this machine for the token created at login."""
    try:
        hostname = socket.gethostname()
    except OSError:
        hostname = ""
    return f"scw-cli {os.getenv('USER', '')}@{hostname}"


class InitWizard:
    """Interactive setup of the active profile."""

    def __init__(
        self,
        prompter: Prompter,
        account: AccountClient,
        console: Console | None = None,
        config_path: Path | None = None,
    ):
        self.prompter = prompter
        self.account = account
        self.console = console or Console()
        self.config_path = config_path

    def run(self, args: InitArgs) -> InitResult:
        """Run the whole wizard, prompting only for values missing from ``args``."""
        existing = self.load_existing_config()
        if existing is not None:
            self.confirm_override(existing)

        secret_key = args.secret_key or self.resolve_secret_key()
        zone, region = self.resolve_zone_and_region(args.zone)
        organization_id = args.organization_id or self.resolve_organization_id(secret_key)
        send_usage = self.resolve_send_usage(args.send_usage)

        resolved = InitArgs(
            secret_key=secret_key,
            zone=zone,
            region=region,
            organization_id=organization_id,
            send_usage=send_usage,
        )
        return self.apply_and_save(resolved, existing or self._new_config())

    def load_existing_config(self) -> Config | None:
        """Load the current config, or None when a new one must be created."""
        try:
            return Config.load(self.config_path)
        except ConfigNotFoundError:
            return None
        except ConfigError as e:
            logger.warning(f"Ignoring existing config: {e}")
            return None

    def confirm_override(self, config: Config) -> None:
        """Show the current config and ask before replacing it.

        Raises:
            InitCancelledError: If the user declines
        """
        self.console.print(f"\nCurrent config is located at [cyan]{config.path}[/cyan]")
        self.console.print(config.render(), style="dim", markup=False, highlight=False)

        if not self.prompter.confirm("Do you want to override current config?", default=True):
            raise InitCancelledError("initialization cancelled")

    def resolve_secret_key(self) -> str:
        """Read a secret key, or log in with an email and password to create one."""
        value = self.prompter.text(
            "Enter a valid secret-key or an email:",
            validate=validate_credential_input,
        )

        kind = classify_credential_input(value)
        if kind is CredentialInput.SECRET_KEY:
            return value
        if kind is CredentialInput.EMAIL:
            return self._login(value)
        raise ValueError(f"invalid email or secret-key: '{value}'")

    def _login(self, email: str) -> str:
        password = self.prompter.password("Enter your password:")
        request = LoginRequest(email=email, password=password, description=login_description())

        # No retry cap: a rejected 2FA code is raised by the account client
        while True:
            token, two_factor_required = self.account.login(request)
            if not two_factor_required:
                return token.secret_key
            request.two_factor_token = self.prompter.text(
                "Enter your 2FA code:",
                validate=validate_two_factor_code,
            )

    def resolve_zone_and_region(self, zone: str | None = None) -> tuple[str, str]:
        """Prompt for a zone unless given one, and derive its region.

        Raises:
            UnknownZoneError: If the zone has no known region
        """
        if not zone:
            zone = self.prompter.text("Select a zone:", default=DEFAULT_ZONE, validate=validate_zone)
            logger.debug(f"Selected zone: {zone}")

        zone = parse_zone(zone)
        return zone, zone_to_region(zone)

    def resolve_organization_id(self, secret_key: str) -> str:
        """Pick the organization ID, prompting unless exactly one is available."""
        try:
            ids = self.account.list_organization_ids(secret_key)
        except AccountError as e:
            logger.warning(f"{e}")
            ids = []

        if len(ids) == 1:
            return ids[0]

        return self.prompter.text(
            "Enter your Organization ID:",
            default=ids[0] if ids else "",
            validate=validate_organization_id,
        )

    def resolve_send_usage(self, send_usage: bool | None = None) -> bool:
        if send_usage is not None:
            return send_usage

        self.console.print(
            "\nTo improve this tool we rely on diagnostic and usage data.\n"
            "Sending such data is optional and can be disabled at any time "
            "by setting [cyan]send_usage[/cyan] to false in your config."
        )
        return self.prompter.confirm("Do you want to send usage statistics and diagnostics?", default=True)

    def apply_and_save(self, args: InitArgs, config: Config | None = None) -> InitResult:
        """Write the resolved values to the active profile and save.

        The profile is saved before the access key is fetched, so a failed
        fetch leaves a usable profile on disk.

        Args:
            args: Fully resolved values (send_usage may be None for no change)
            config: Config to update. Loaded from disk, or created, when None.

        Returns:
            InitResult, partial when the access key could not be retrieved

        Raises:
            ConfigSaveError: If either save fails
        """
        if config is None:
            config = self.load_existing_config() or self._new_config()

        if args.send_usage is not None:
            config.send_usage = args.send_usage

        profile = config.get_active_profile()
        profile.secret_key = args.secret_key
        profile.default_zone = args.zone
        profile.default_region = args.region
        profile.default_organization_id = args.organization_id
        self._save(config, ConfigSaveError.PROFILE)

        try:
            access_key = self.account.get_access_key(args.secret_key)
        except AccountError as e:
            self.console.print(f"Config saved at [cyan]{config.path}[/cyan]:")
            self.console.print(config.render(), style="dim", markup=False, highlight=False)
            return InitResult(config=config, access_key_error=e)

        profile.access_key = access_key
        self._save(config, ConfigSaveError.ACCESS_KEY)

        return InitResult(config=config)

    def _save(self, config: Config, stage: str) -> None:
        try:
            config.save()
        except OSError as e:
            raise ConfigSaveError(stage, str(config.path), e) from e

    def _new_config(self) -> Config:
        config = Config(path=self.config_path)
        self.console.print(f"Creating new config at [cyan]{config.path}[/cyan]")
        return config
