# ABOUTME: Error types raised by the Scaleway CLI init flow
# ABOUTME: Separates cancellation, remote, config and persistence failures

"""Scaleway CLI error types."""


class ScwCliError(RuntimeError):
    """Base CLI error."""


class InitCancelledError(ScwCliError):
    """The user declined a prompt or interrupted it."""


class AccountError(ScwCliError):
    """The Account API rejected a request or could not be reached."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TwoFactorError(AccountError):
    """The Account API rejected the submitted 2FA code."""


class ConfigError(ValueError):
    """Raised when the config file is invalid."""


class ConfigNotFoundError(ConfigError):
    """No config file exists at the configured path."""


class UnknownZoneError(ValueError):
    """The zone has no known region."""


class ConfigSaveError(ScwCliError):
    """Writing the config file failed.

    ``stage`` is ``"profile"`` when the first save (profile fields) failed and
    ``"access_key"`` when the save after access key retrieval failed. In the
    latter case the profile fields are already on disk.
    """

    PROFILE = "profile"
    ACCESS_KEY = "access_key"

    def __init__(self, stage: str, path: str, cause: Exception) -> None:
        if stage == self.PROFILE:
            what = "Could not save profile"
        else:
            what = "Profile saved but could not save access key"
        super().__init__(f"{what} to {path}: {cause}")
        self.stage = stage
        self.path = path
        self.cause = cause
