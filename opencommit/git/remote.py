"""Remote listing and push.

Contains:
- get_remotes: Names of the configured remotes
- push_to_remote: Push the current branch to a remote
"""

from pathlib import Path
from typing import Optional

from opencommit.git.runner import _run_git_command


def get_remotes(repo_root: Optional[Path] = None) -> list[str]:
    """Get the names of the configured remotes, in git's order."""
    output = _run_git_command(["remote"], repo_root=repo_root)
    return [line.strip() for line in output.splitlines() if line.strip()]


def push_to_remote(remote: str, repo_root: Optional[Path] = None) -> str:
    """Push to a remote.

    Args:
        remote: Name of the remote.
        repo_root: The root directory of the git repository.

    Returns:
        The output of `git push`.

    Raises:
        GitError: If the push fails. Failed pushes are not retried.
    """
    return _run_git_command(["push", "--verbose", remote], repo_root=repo_root)
