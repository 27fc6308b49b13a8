# ABOUTME: Syntactic validators for Scaleway identifiers and credentials
# ABOUTME: Classifies raw credential input as email, secret key or invalid

"""Input validation for the Scaleway CLI."""

import re
from enum import Enum

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
UUID_PATTERN = re.compile(r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$")
ACCESS_KEY_PATTERN = re.compile(r"^SCW[A-Z0-9]{17}$")
ZONE_PATTERN = re.compile(r"^[a-z]{2}-[a-z]{3}-[0-9]+$")
REGION_PATTERN = re.compile(r"^[a-z]{2}-[a-z]{3}$")
TWO_FACTOR_CODE_PATTERN = re.compile(r"^[0-9]{6}$")


class CredentialInput(Enum):
    """Kind of value entered at the credential prompt."""

    EMAIL = "email"
    SECRET_KEY = "secret-key"
    INVALID = "invalid"


def _matches(pattern: re.Pattern, value: str | None) -> bool:
    return bool(value) and pattern.match(value) is not None


def is_email(value: str | None) -> bool:
    return _matches(EMAIL_PATTERN, value)


def is_uuid(value: str | None) -> bool:
    return _matches(UUID_PATTERN, value)


def is_secret_key(value: str | None) -> bool:
    """Secret keys are UUIDs."""
    return is_uuid(value)


def is_organization_id(value: str | None) -> bool:
    """Organization IDs are UUIDs."""
    return is_uuid(value)


def is_access_key(value: str | None) -> bool:
    return _matches(ACCESS_KEY_PATTERN, value)


def is_zone(value: str | None) -> bool:
    return _matches(ZONE_PATTERN, value)


def is_region(value: str | None) -> bool:
    return _matches(REGION_PATTERN, value)


def classify_credential_input(value: str | None) -> CredentialInput:
    """Classify what the user typed at the credential prompt.

    Email is checked before the secret-key shape. The two shapes cannot
    overlap today (a UUID has no ``@``) but the order is kept stable.

    Args:
        value: Raw user input

    Returns:
        The matching CredentialInput member
    """
    if is_email(value):
        return CredentialInput.EMAIL
    if is_secret_key(value):
        return CredentialInput.SECRET_KEY
    return CredentialInput.INVALID


def validate_credential_input(value: str) -> bool | str:
    """Validate the email or secret-key prompt.

    Returns:
        True if valid, error message if invalid
    """
    if classify_credential_input(value) is CredentialInput.INVALID:
        return "Invalid email or secret-key"
    return True


def validate_zone(value: str) -> bool | str:
    if is_zone(value):
        return True
    return "Invalid zone (e.g., fr-par-1)"


def validate_organization_id(value: str) -> bool | str:
    if is_organization_id(value):
        return True
    return "Invalid organization ID (expected a UUID)"


def validate_two_factor_code(value: str) -> bool | str:
    if _matches(TWO_FACTOR_CODE_PATTERN, value):
        return True
    return "Invalid 2FA code (6 digits expected)"
