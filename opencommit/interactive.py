"""Interactive prompts and progress indicator for opencommit.

Prompts are backed by questionary. A prompt dismissed without an answer
(Ctrl-C, Escape) comes back as None and is raised as UserCancelledError,
so every caller treats cancellation the same way.
"""

import os
from contextlib import contextmanager
from typing import Iterator, Optional

import questionary
from rich.console import Console

console = Console()


class UserCancelledError(Exception):
    """Raised when an interactive prompt is dismissed without a choice."""

    pass


@contextmanager
def loading_spinner(message: str, status_console: Optional[Console] = None) -> Iterator[None]:
    """Show a spinner while a blocking operation runs.

    The spinner is always torn down when the block exits, whether it
    returns, raises, or is interrupted.

    Args:
        message: Message to display alongside the spinner.
        status_console: Console to draw on. Defaults to the module console.
    """
    # In test environments, don't display a spinner
    if os.environ.get("PYTEST_CURRENT_TEST") or os.environ.get("CI"):
        yield
        return

    with (status_console or console).status(message, spinner="dots"):
        yield


class Prompter:
    """Yes/no, single-choice and multi-choice prompts."""

    def confirm(self, message: str, default: bool = True) -> bool:
        """Ask a yes/no question.

        Raises:
            UserCancelledError: If the prompt is dismissed.
        """
        answer = questionary.confirm(message, default=default).ask()
        if answer is None:
            raise UserCancelledError("Prompt cancelled")
        return answer

    def select(self, message: str, choices: list[str]) -> str:
        """Ask the user to pick exactly one of the choices.

        Raises:
            UserCancelledError: If the prompt is dismissed.
        """
        answer = questionary.select(message, choices=choices).ask()
        if answer is None:
            raise UserCancelledError("Prompt cancelled")
        return answer

    def checkbox(self, message: str, choices: list[str]) -> list[str]:
        """Ask the user to pick any number of the choices.

        Returns:
            The selected choices, possibly empty.

        Raises:
            UserCancelledError: If the prompt is dismissed.
        """
        answer = questionary.checkbox(message, choices=choices).ask()
        if answer is None:
            raise UserCancelledError("Prompt cancelled")
        return answer
