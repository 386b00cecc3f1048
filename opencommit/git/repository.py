"""Repository facade used by the commit workflow.

GitRepository binds the plumbing functions of this package to one
repository root so that the workflow only deals with a single object.
"""

import logging
from pathlib import Path

from opencommit.git.commit import create_commit
from opencommit.git.diff import get_staged_diff
from opencommit.git.ignore import load_ignore_patterns
from opencommit.git.index import stage_files
from opencommit.git.remote import get_remotes, push_to_remote
from opencommit.git.runner import get_repo_root
from opencommit.git.status import get_changed_files, get_staged_files

logger = logging.getLogger(__name__)


class GitRepository:
    """A git working tree rooted at `root`."""

    def __init__(self, root: Path):
        self.root = root

    def ignore_patterns(self) -> list[str]:
        """Default plus project-level ignore patterns."""
        return load_ignore_patterns(self.root)

    def staged_files(self, ignore_patterns: list[str]) -> list[str]:
        return get_staged_files(ignore_patterns, repo_root=self.root)

    def changed_files(self, ignore_patterns: list[str]) -> list[str]:
        return get_changed_files(ignore_patterns, repo_root=self.root)

    def stage(self, files: list[str]) -> None:
        logger.debug("Staging %d file(s)", len(files))
        stage_files(files, repo_root=self.root)

    def diff_text(self, files: list[str]) -> str:
        return get_staged_diff(files, repo_root=self.root)

    def commit(self, message: str, extra_args: list[str]) -> str:
        return create_commit(message, extra_args, repo_root=self.root)

    def remotes(self) -> list[str]:
        return get_remotes(repo_root=self.root)

    def push(self, remote: str) -> str:
        return push_to_remote(remote, repo_root=self.root)


def open_repo() -> GitRepository:
    """Open the repository containing the current directory.

    Raises:
        NotARepositoryError: If not in a git repository.
    """
    return GitRepository(get_repo_root())
