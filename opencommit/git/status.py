"""Git status utilities.

Contains:
- get_status_entries: Parse `git status --porcelain` into (XY, path) pairs
- get_staged_files: Paths staged in the index
- get_changed_files: Paths modified in the worktree or untracked
"""

from pathlib import Path
from typing import Optional

from opencommit.git.ignore import should_ignore
from opencommit.git.runner import _run_git_command

# Index states that put a file into the next commit
_STAGED_CODES = {"A", "M", "R", "T"}


def get_status_entries(repo_root: Optional[Path] = None) -> list[tuple[str, str]]:
    """Get git status as a list of (two-letter code, path) pairs.

    Uses the NUL-separated porcelain format so that paths with spaces
    or non-ASCII characters come back unquoted.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Status entries in git's order. For renames and copies the path is
        the new path.
    """
    output = _run_git_command(
        ["status", "--porcelain=v1", "-z", "--untracked-files=all"],
        repo_root=repo_root,
        strip=False,
    )

    entries = []
    records = iter(output.split("\0"))
    for record in records:
        if len(record) < 4:
            continue
        code, path = record[:2], record[3:]
        entries.append((code, path))
        # Renames and copies are followed by a record holding the old path
        if code[0] in ("R", "C"):
            next(records, None)
    return entries


def _filter_paths(paths: list[str], ignore_patterns: list[str]) -> list[str]:
    """Drop ignored paths, then sort and deduplicate."""
    return sorted({p for p in paths if not should_ignore(p, ignore_patterns)})


def get_staged_files(ignore_patterns: list[str], repo_root: Optional[Path] = None) -> list[str]:
    """Get the paths that are staged for the next commit.

    Args:
        ignore_patterns: Patterns of paths to leave out.
        repo_root: The root directory of the git repository.

    Returns:
        Sorted, deduplicated list of staged paths.
    """
    paths = [
        path
        for code, path in get_status_entries(repo_root)
        if code[0] in _STAGED_CODES
    ]
    return _filter_paths(paths, ignore_patterns)


def get_changed_files(ignore_patterns: list[str], repo_root: Optional[Path] = None) -> list[str]:
    """Get the paths with unstaged worktree changes, including untracked files.

    Args:
        ignore_patterns: Patterns of paths to leave out.
        repo_root: The root directory of the git repository.

    Returns:
        Sorted, deduplicated list of changed paths.
    """
    paths = [
        path
        for code, path in get_status_entries(repo_root)
        if code == "??" or code[1] == "M"
    ]
    return _filter_paths(paths, ignore_patterns)
