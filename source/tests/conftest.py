"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from scw_cli.account import AccountClient
from scw_cli.errors import InitCancelledError

SECRET_KEY = "11111111-2222-3333-4444-555555555555"
ORGANIZATION_ID = "aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee"
OTHER_ORGANIZATION_ID = "ffffffff-bbbb-cccc-dddd-eeeeeeeeeeee"
ACCESS_KEY = "SCWABCDEFGHIJ0123456"


class ScriptedPrompter:
    """Prompter that replays canned answers instead of reading a terminal.

    Answers rejected by a prompt's validator are recorded in ``rejected`` and
    the next answer is used, like a user retyping. Running out of answers
    behaves like Ctrl+D.
    """

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.calls = []
        self.rejected = []

    def _next(self):
        if not self.answers:
            raise InitCancelledError("initialization cancelled")
        return self.answers.pop(0)

    def text(self, message, default="", validate=None):
        self.calls.append(("text", message, default))
        while True:
            answer = self._next()
            if answer == "" and default:
                answer = default
            result = validate(answer) if validate else True
            if result is True:
                return answer
            self.rejected.append((answer, result))

    def password(self, message):
        self.calls.append(("password", message, None))
        return self._next()

    def confirm(self, message, default=True):
        self.calls.append(("confirm", message, default))
        return self._next()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point the config at a temporary file and clear profile overrides."""
    monkeypatch.setenv("SCW_CONFIG_PATH", str(tmp_path / "scw" / "config.json"))
    monkeypatch.delenv("SCW_PROFILE", raising=False)
    monkeypatch.delenv("SCW_ACCOUNT_API_URL", raising=False)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "scw" / "config.json"


@pytest.fixture
def account():
    """Account client double with one organization and a working access key."""
    client = MagicMock(spec=AccountClient)
    client.list_organization_ids.return_value = [ORGANIZATION_ID]
    client.get_access_key.return_value = ACCESS_KEY
    return client
