# ABOUTME: Client for the Scaleway Account API
# ABOUTME: Creates login tokens, fetches access keys and lists organizations

"""Scaleway Account API client."""

import logging
import os
from dataclasses import dataclass
from typing import Any

import requests

from scw_cli.errors import AccountError, TwoFactorError

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_URL = "https://account.scaleway.com"
ACCOUNT_URL_ENV_VAR = "SCW_ACCOUNT_API_URL"


@dataclass
class LoginRequest:
    """Credentials sent to create a token."""

    email: str
    password: str
    description: str = ""
    two_factor_token: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = {
            "email": self.email,
            "password": self.password,
            "description": self.description,
            "renewable": False,
            "expires": False,
        }
        if self.two_factor_token:
            payload["2FA_token"] = self.two_factor_token
        return payload


@dataclass
class Token:
    """Token issued by a successful login."""

    secret_key: str
    access_key: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Token":
        return cls(secret_key=data["secret_key"], access_key=data.get("access_key"))


class AccountClient:
    """Thin wrapper over the Account API endpoints used by ``scw init``."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        """Initialize the client.

        Args:
            base_url: API root. Defaults to $SCW_ACCOUNT_API_URL or the public endpoint.
            timeout: Per-request timeout in seconds. None waits indefinitely.
        """
        self.base_url = (base_url or os.getenv(ACCOUNT_URL_ENV_VAR) or DEFAULT_ACCOUNT_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

    def login(self, request: LoginRequest) -> tuple[Token | None, bool]:
        """Create a token from an email and password.

        Returns:
            (token, two_factor_required). The token is None when a 2FA code is required.

        Raises:
            TwoFactorError: If the submitted 2FA code was rejected
            AccountError: If the credentials were rejected or the API is unreachable
        """
        response = self._request("POST", "/tokens", json=request.to_payload())

        if response.status_code == 403:
            if request.two_factor_token:
                raise TwoFactorError("Invalid 2FA code", status_code=403)
            logger.debug("Login requires a 2FA code")
            return None, True

        if response.status_code != 201:
            raise AccountError(_error_message("Login failed", response), status_code=response.status_code)

        data = _json(response)
        try:
            return Token.from_dict(data["token"]), False
        except (KeyError, TypeError) as e:
            raise AccountError(f"Login failed: unexpected response ({e})") from e

    def get_access_key(self, secret_key: str) -> str:
        """Fetch the access key paired with a secret key."""
        response = self._request("GET", f"/tokens/{secret_key}", secret_key=secret_key)

        if response.status_code != 200:
            raise AccountError(
                _error_message("Could not get access key", response), status_code=response.status_code
            )

        data = _json(response)
        try:
            return data["token"]["access_key"]
        except (KeyError, TypeError) as e:
            raise AccountError(f"Could not get access key: unexpected response ({e})") from e

    def list_organization_ids(self, secret_key: str) -> list[str]:
        """List the IDs of the organizations the secret key can access."""
        response = self._request("GET", "/organizations", secret_key=secret_key)

        if response.status_code != 200:
            raise AccountError(
                _error_message("Could not list organizations", response), status_code=response.status_code
            )

        data = _json(response)
        try:
            ids = [organization["id"] for organization in data["organizations"]]
        except (KeyError, TypeError) as e:
            raise AccountError(f"Could not list organizations: unexpected response ({e})") from e

        logger.debug(f"Found {len(ids)} organization(s)")
        return ids

    def _request(self, method: str, path: str, secret_key: str | None = None, **kwargs) -> requests.Response:
        headers = {}
        if secret_key:
            headers["X-Auth-Token"] = secret_key

        try:
            response = self.session.request(
                method, f"{self.base_url}{path}", headers=headers, timeout=self.timeout, **kwargs
            )
        except requests.exceptions.RequestException as e:
            raise AccountError(f"Could not reach Scaleway Account API: {e}") from e

        # The secret key is part of some paths, so only the method and status are logged
        logger.debug(f"{method} {path.split('/')[1]} -> {response.status_code}")
        return response


def _json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise AccountError(f"Invalid JSON from Scaleway Account API: {e}") from e


def _error_message(prefix: str, response: requests.Response) -> str:
    """Build an error message, using the API's own message when present."""
    try:
        message = response.json().get("message")
    except (ValueError, AttributeError):
        message = None
    return f"{prefix}: {message or f'HTTP {response.status_code}'}"
