"""Git diff utilities.

Contains:
- get_staged_diff: Get the staged diff for a set of files
- _is_diff_excluded: Check a path against the binary/lock-file denylist
- DIFF_EXCLUDE_MARKERS: Path fragments that keep a file out of the diff
"""

from pathlib import Path
from typing import Optional

from opencommit.git.runner import _run_git_command

# Lock files and images add noise (or binary blobs) without describing the change
DIFF_EXCLUDE_MARKERS = [
    ".lock",
    "-lock.",
    ".svg",
    ".png",
    ".jpg",
    ".jpeg",
    ".webp",
    ".gif",
]

ONLY_EXCLUDED_FILES_DIFF = "(Only ignored files staged - no code changes to describe)"


def _is_diff_excluded(path: str) -> bool:
    """Check if a path contains any of the denylisted fragments."""
    return any(marker in path for marker in DIFF_EXCLUDE_MARKERS)


def get_staged_diff(files: list[str], repo_root: Optional[Path] = None) -> str:
    """Get the staged diff for the given files.

    Files matching the denylist are left out because they are typically
    auto-generated or binary.

    Args:
        files: Repository-relative paths to include.
        repo_root: The root directory of the git repository.

    Returns:
        The staged diff text, or a placeholder line when every file was
        excluded.
    """
    included = [f for f in files if not _is_diff_excluded(f)]
    if not included:
        return ONLY_EXCLUDED_FILES_DIFF

    return _run_git_command(["diff", "--staged", "--"] + included, repo_root=repo_root)
