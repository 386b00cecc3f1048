"""Git index mutation.

Contains:
- stage_files: Add paths to the index
"""

from pathlib import Path
from typing import Optional

from opencommit.git.runner import _run_git_command


def stage_files(files: list[str], repo_root: Optional[Path] = None) -> None:
    """Stage the given paths.

    Args:
        files: Repository-relative paths to stage.
        repo_root: The root directory of the git repository.

    Raises:
        GitError: If git refuses to stage any of the paths.
    """
    if not files:
        return
    _run_git_command(["add", "--"] + list(files), repo_root=repo_root)
