"""Resolution of the files that make up the commit."""

import logging
from typing import Optional

from rich.console import Console

from opencommit.git.exceptions import NoChangesError
from opencommit.interactive import Prompter, UserCancelledError, console as default_console

logger = logging.getLogger(__name__)

STAGE_ALL_PROMPT = "Do you want to stage all files and generate commit message?"
SELECT_FILES_PROMPT = "Select the files you want to add to the commit:"


class StagingResolver:
    """Decides which files are part of the commit, staging them if needed.

    Args:
        repo: Repository collaborator (see opencommit.git.GitRepository).
        prompter: Interactive prompt collaborator.
        ignore_patterns: Patterns of paths that never enter the commit.
        console: Console for status lines.
    """

    def __init__(
        self,
        repo,
        prompter: Prompter,
        ignore_patterns: list[str],
        console: Optional[Console] = None,
    ):
        self.repo = repo
        self.prompter = prompter
        self.ignore_patterns = ignore_patterns
        self.console = console or default_console

    def resolve(self, stage_all: bool = False) -> list[str]:
        """Get the files for the commit.

        When nothing is staged, the user chooses between staging every
        changed file and picking files by hand.

        Args:
            stage_all: Stage every changed file without asking.

        Returns:
            The sorted, non-empty list of staged paths.

        Raises:
            NoChangesError: If there is nothing to commit.
            UserCancelledError: If a prompt is dismissed or no file is picked.
        """
        while True:
            if stage_all:
                return self._stage_all()

            staged = self.repo.staged_files(self.ignore_patterns)
            if staged:
                return staged

            changed = self.repo.changed_files(self.ignore_patterns)
            if not changed:
                raise NoChangesError("No changes detected, write some code and run `oco` again")

            self.console.print("[yellow]No files are staged[/yellow]")
            if self.prompter.confirm(STAGE_ALL_PROMPT, default=False):
                stage_all = True
                continue

            return self._stage_selected(changed)

    def _stage_all(self) -> list[str]:
        changed = self.repo.changed_files(self.ignore_patterns)
        if not changed:
            raise NoChangesError("No changes detected, write some code and run `oco` again")
        self.repo.stage(changed)
        return changed

    def _stage_selected(self, changed: list[str]) -> list[str]:
        selected = self.prompter.checkbox(SELECT_FILES_PROMPT, changed)
        if not selected:
            raise UserCancelledError("No files selected")
        self.repo.stage(selected)
        return sorted(set(selected))
