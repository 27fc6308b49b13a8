# ABOUTME: Interactive prompt helpers for the Scaleway CLI
# ABOUTME: Wraps questionary so wizards can be driven by scripted prompters in tests

"""Prompt utilities for CLI commands."""

from collections.abc import Callable
from typing import Protocol

import questionary

from scw_cli.errors import InitCancelledError

Validator = Callable[[str], bool | str]


class Prompter(Protocol):
    """Blocking prompts used by interactive commands.

    Every method raises InitCancelledError on Ctrl+C or end of input.
    """

    def text(self, message: str, default: str = "", validate: Validator | None = None) -> str: ...

    def password(self, message: str) -> str: ...

    def confirm(self, message: str, default: bool = True) -> bool: ...


class QuestionaryPrompter:
    """Prompter backed by questionary."""

    def text(self, message: str, default: str = "", validate: Validator | None = None) -> str:
        answer = questionary.text(message, default=default, validate=validate).ask()
        return _answered(answer)

    def password(self, message: str) -> str:
        answer = questionary.password(message).ask()
        return _answered(answer)

    def confirm(self, message: str, default: bool = True) -> bool:
        answer = questionary.confirm(message, default=default).ask()
        return _answered(answer)


def _answered(answer):
    # questionary returns None when the prompt is interrupted
    if answer is None:
        raise InitCancelledError("initialization cancelled")
    return answer
