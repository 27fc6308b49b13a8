# ABOUTME: Configuration management for the Scaleway CLI
# ABOUTME: Handles profiles, the active profile and config file persistence

"""Configuration management for the Scaleway CLI."""

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from scw_cli.errors import ConfigError, ConfigNotFoundError

CONFIG_PATH_ENV_VAR = "SCW_CONFIG_PATH"
PROFILE_ENV_VAR = "SCW_PROFILE"
DEFAULT_PROFILE_NAME = "default"


def get_config_path() -> Path:
    """Return the config file location.

    Priority:
    1. $SCW_CONFIG_PATH
    2. $XDG_CONFIG_HOME/scw/config.json
    3. ~/.config/scw/config.json
    """
    if os.getenv(CONFIG_PATH_ENV_VAR):
        return Path(os.environ[CONFIG_PATH_ENV_VAR])

    config_home = os.getenv("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "scw" / "config.json"


@dataclass
class Profile:
    """Credentials and defaults used by CLI commands."""

    access_key: str | None = None
    secret_key: str | None = None
    default_organization_id: str | None = None
    default_region: str | None = None
    default_zone: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert profile to dictionary, leaving out unset fields."""
        return {key: value for key, value in asdict(self).items() if value is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        """Create profile from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


class Config:
    """Scaleway CLI configuration.

    The top-level profile fields form the ``default`` profile. Other named
    profiles live under ``profiles``, and ``active_profile`` selects one.
    """

    def __init__(
        self,
        path: Path | None = None,
        profile: Profile | None = None,
        profiles: dict[str, Profile] | None = None,
        active_profile: str | None = None,
        send_usage: bool = False,
    ):
        """Initialize configuration."""
        self.path = Path(path) if path else get_config_path()
        self.profile = profile or Profile()
        self.profiles = profiles or {}
        self.active_profile = active_profile
        self.send_usage = send_usage

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Raises:
            ConfigNotFoundError: If no config file exists.
            ConfigError: If the file cannot be read or parsed.
        """
        config_path = Path(path) if path else get_config_path()

        if not config_path.exists():
            raise ConfigNotFoundError(f"Config not found: {config_path}")

        try:
            with open(config_path) as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Could not load config {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Could not load config {config_path}: expected an object")

        profiles = data.get("profiles") or {}
        if not isinstance(profiles, dict):
            raise ConfigError(f"Could not load config {config_path}: 'profiles' must be an object")

        for name, values in profiles.items():
            if values is not None and not isinstance(values, dict):
                raise ConfigError(f"Could not load config {config_path}: profile '{name}' must be an object")

        send_usage = data.get("send_usage", False)
        if not isinstance(send_usage, bool):
            raise ConfigError(f"Could not load config {config_path}: 'send_usage' must be true or false")

        return cls(
            path=config_path,
            profile=Profile.from_dict(data),
            profiles={name: Profile.from_dict(values or {}) for name, values in profiles.items()},
            active_profile=data.get("active_profile"),
            send_usage=send_usage,
        )

    def to_dict(self) -> dict[str, Any]:
        data = self.profile.to_dict()
        if self.active_profile:
            data["active_profile"] = self.active_profile
        data["send_usage"] = self.send_usage
        if self.profiles:
            data["profiles"] = {name: profile.to_dict() for name, profile in self.profiles.items()}
        return data

    def save(self) -> None:
        """Save configuration to file, readable by the owner only.

        The file is written next to the config and renamed over it, so a failed
        write leaves the previous config in place.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")

        try:
            fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def active_profile_name(self) -> str:
        return os.getenv(PROFILE_ENV_VAR) or self.active_profile or DEFAULT_PROFILE_NAME

    def get_active_profile(self) -> Profile:
        """Return the active profile, creating it if it does not exist yet."""
        name = self.active_profile_name()
        if name == DEFAULT_PROFILE_NAME:
            return self.profile
        return self.profiles.setdefault(name, Profile())

    def render(self, show_secrets: bool = False) -> str:
        """Render the config as JSON for display.

        Secret keys are cut to their first 8 characters unless ``show_secrets``.
        """
        data = self.to_dict()
        if not show_secrets:
            _mask_secret(data)
            for values in data.get("profiles", {}).values():
                _mask_secret(values)
        return json.dumps(data, indent=2)

    def __str__(self) -> str:
        return self.render()


def _mask_secret(data: dict[str, Any]) -> None:
    secret_key = data.get("secret_key")
    if secret_key:
        data["secret_key"] = secret_key[:8] + "-xxxx-xxxx-xxxx-xxxxxxxxxxxx"
