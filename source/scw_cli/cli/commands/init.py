# ABOUTME: Interactive setup wizard for first-time users
# ABOUTME: Creates or overrides the active profile of the Scaleway CLI config

"""Init command - Interactive setup wizard."""

from cleo.commands.command import Command
from cleo.helpers import option
from rich.console import Console
from rich.panel import Panel

from scw_cli.account import AccountClient
from scw_cli.errors import ConfigSaveError, InitCancelledError, ScwCliError
from scw_cli.prompts import Prompter, QuestionaryPrompter
from scw_cli.validators import is_organization_id, is_secret_key
from scw_cli.wizard import InitArgs, InitResult, InitWizard
from scw_cli.zones import ZONE_REGIONS, parse_zone

BANNER_MIN_WIDTH = 80

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def parse_send_usage(value: str | None) -> bool | None:
    """Parse the --send-usage option. None means the user will be asked."""
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"invalid value for --send-usage: '{value}' (expected true or false)")


def parse_init_args(
    secret_key: str | None = None,
    zone: str | None = None,
    organization_id: str | None = None,
    send_usage: str | None = None,
) -> InitArgs:
    """Validate command options before any prompt is shown.

    Raises:
        ValueError: If an option value is malformed
    """
    if secret_key and not is_secret_key(secret_key):
        raise ValueError(f"invalid secret-key: '{secret_key}'")

    if zone:
        zone = parse_zone(zone)
        if zone not in ZONE_REGIONS:
            raise ValueError(f"invalid zone: '{zone}' (expected one of {', '.join(ZONE_REGIONS)})")

    if organization_id and not is_organization_id(organization_id):
        raise ValueError(f"invalid organization-id: '{organization_id}'")

    return InitArgs(
        secret_key=secret_key or None,
        zone=zone or None,
        organization_id=organization_id or None,
        send_usage=parse_send_usage(send_usage),
    )


class InitCommand(Command):
    name = "init"
    description = "Initialize the active profile of the config"

    options = [
        option("secret-key", description="Secret key to use (skips login)", flag=False, default=None),
        option("zone", description="Default zone (e.g., fr-par-1)", flag=False, default=None),
        option("organization-id", description="Default organization ID", flag=False, default=None),
        option(
            "send-usage",
            description="Send usage statistics and diagnostics (true/false)",
            flag=False,
            default=None,
        ),
    ]

    def __init__(
        self,
        prompter: Prompter | None = None,
        account: AccountClient | None = None,
        console: Console | None = None,
    ):
        super().__init__()
        self._prompter = prompter
        self._account = account
        self._console = console

    def handle(self) -> int:
        """Execute the init command."""
        console = self._console or Console()

        try:
            args = parse_init_args(
                secret_key=self.option("secret-key"),
                zone=self.option("zone"),
                organization_id=self.option("organization-id"),
                send_usage=self.option("send-usage"),
            )
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            return 1

        self._show_banner(console)

        wizard = InitWizard(
            prompter=self._prompter or QuestionaryPrompter(),
            account=self._account or AccountClient(),
            console=console,
        )

        try:
            result = wizard.run(args)
        except (InitCancelledError, KeyboardInterrupt):
            console.print("\n[yellow]Initialization cancelled.[/yellow]")
            return 1
        except ConfigSaveError as e:
            console.print(f"\n[red]Error: {e}[/red]")
            if e.stage == ConfigSaveError.ACCESS_KEY:
                console.print("[dim]Your profile was saved without an access key.[/dim]")
            return 1
        except (ScwCliError, ValueError) as e:
            console.print(f"\n[red]Error: {e}[/red]")
            return 1

        return self._show_result(console, result)

    def _show_banner(self, console: Console) -> None:
        if console.width >= BANNER_MIN_WIDTH:
            welcome = Panel.fit(
                "[bold cyan]Welcome to the Scaleway CLI![/bold cyan]\n\n"
                "This wizard will set up your active profile:\n"
                "  • Secret key (or login with your email)\n"
                "  • Default zone and region\n"
                "  • Default organization",
                border_style="cyan",
                padding=(1, 2),
            )
            console.print(welcome)
        else:
            console.print("Welcome to the Scaleway CLI\n")

    def _show_result(self, console: Console, result: InitResult) -> int:
        if result.partial:
            console.print(f"\n[red]Error: {result.access_key_error}[/red]")
            console.print("Failed to retrieve Access Key for the given Secret Key.")
            return 1

        console.print(f"\n[green]✓ Config saved at {result.config.path}[/green]")
        return 0
