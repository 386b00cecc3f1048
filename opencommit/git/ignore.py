"""Ignore rules for files that should never enter an AI-generated commit.

Contains:
- DEFAULT_IGNORE_PATTERNS: Lock-file patterns ignored in every repository
- load_ignore_patterns: Defaults plus the repository's .opencommitignore
- should_ignore: Check whether a path matches any ignore pattern
"""

import fnmatch
from pathlib import Path

from opencommit.git.exceptions import GitError

IGNORE_FILE_NAME = ".opencommitignore"

# Lock files are auto-generated and only inflate the prompt
DEFAULT_IGNORE_PATTERNS = [
    "*-lock.*",
    "*.lock",
]


def load_ignore_patterns(repo_root: Path) -> list[str]:
    """Get the ignore patterns that apply to a repository.

    Lines in .opencommitignore that are blank or start with '#' are skipped.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        The default patterns followed by the project's own patterns.

    Raises:
        GitError: If .opencommitignore exists but cannot be read.
    """
    patterns = list(DEFAULT_IGNORE_PATTERNS)

    ignore_file = repo_root / IGNORE_FILE_NAME
    if ignore_file.is_file():
        try:
            text = ignore_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise GitError(f"Could not read {IGNORE_FILE_NAME}: {e}")
        for line in text.splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                patterns.append(line)

    return patterns


def should_ignore(path: str, patterns: list[str]) -> bool:
    """Check if a path matches any of the ignore patterns.

    Supports glob patterns like *.lock, build/*, and directory
    patterns ending in '/'. Patterns without a slash also match the
    basename at any depth, as in .gitignore.

    Args:
        path: Repository-relative file path.
        patterns: List of patterns to match against.

    Returns:
        True if the path should be ignored.
    """
    name = Path(path).name
    for pattern in patterns:
        anchored = pattern.lstrip("/")
        # Directory pattern: ignore everything below it
        if anchored.endswith("/"):
            if path.startswith(anchored) or f"/{anchored}" in f"/{path}":
                return True
            continue
        if path == anchored or fnmatch.fnmatch(path, anchored):
            return True
        if "/" not in pattern and fnmatch.fnmatch(name, pattern):
            return True
    return False
