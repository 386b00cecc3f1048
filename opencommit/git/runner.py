"""Thin subprocess wrapper around the git executable.

Every git call in opencommit goes through ``_run_git_command`` so that
failures surface as GitError with git's own stderr attached.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from opencommit.git.exceptions import GitError, NotARepositoryError

logger = logging.getLogger(__name__)


def _run_git_command(
    args: list[str],
    repo_root: Optional[Path] = None,
    strip: bool = True,
) -> str:
    """Invoke ``git <args>`` and hand back stdout.

    Args:
        args: Arguments after ``git``.
        repo_root: Working directory for the call. None means the cwd.
        strip: Trim leading and trailing whitespace. Pass False for
            porcelain output, where a leading space is a status column.

    Raises:
        GitError: git exited non-zero or could not be started.
    """
    command = ["git", *args]
    logger.debug("Running: %s", " ".join(command))
    try:
        completed = subprocess.run(command, cwd=repo_root, capture_output=True, text=True, check=True)
    except FileNotFoundError:
        raise GitError("git executable not found on PATH.")
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip()
        raise GitError(f"`{' '.join(command)}` exited with status {e.returncode}\n{detail}".rstrip())

    output = completed.stdout
    return output.strip() if strip else output


def get_repo_root() -> Path:
    """Top-level directory of the repository containing the cwd.

    Raises:
        NotARepositoryError: The cwd is outside any git work tree.
    """
    try:
        top_level = _run_git_command(["rev-parse", "--show-toplevel"])
    except GitError:
        raise NotARepositoryError("Not a git repository (or any of the parent directories).")
    return Path(top_level)
