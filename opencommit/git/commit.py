"""Commit creation.

Contains:
- create_commit: Run `git commit` with a message and pass-through arguments
"""

from pathlib import Path
from typing import Optional

from opencommit.git.runner import _run_git_command


def create_commit(
    message: str,
    extra_args: Optional[list[str]] = None,
    repo_root: Optional[Path] = None,
) -> str:
    """Create a commit from the staged changes.

    Args:
        message: The commit message.
        extra_args: Extra arguments forwarded verbatim to `git commit`.
        repo_root: The root directory of the git repository.

    Returns:
        The output of `git commit`.

    Raises:
        GitError: If the commit fails (including a rejecting hook).
    """
    args = ["commit", "-m", message] + list(extra_args or [])
    return _run_git_command(args, repo_root=repo_root)
