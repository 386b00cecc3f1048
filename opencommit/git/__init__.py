"""Git plumbing for opencommit.

This package provides the repository collaborator with:
- exceptions: GitError, NotARepositoryError, NoChangesError
- runner: _run_git_command, get_repo_root
- ignore: load_ignore_patterns, should_ignore, DEFAULT_IGNORE_PATTERNS
- status: get_status_entries, get_staged_files, get_changed_files
- diff: get_staged_diff, DIFF_EXCLUDE_MARKERS
- index: stage_files
- commit: create_commit
- remote: get_remotes, push_to_remote
- repository: GitRepository, open_repo
"""

# Exceptions
from opencommit.git.exceptions import (
    GitError,
    NotARepositoryError,
    NoChangesError,
)

# Runner utilities
from opencommit.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Ignore rules
from opencommit.git.ignore import (
    DEFAULT_IGNORE_PATTERNS,
    IGNORE_FILE_NAME,
    load_ignore_patterns,
    should_ignore,
)

# Status utilities
from opencommit.git.status import (
    get_status_entries,
    get_staged_files,
    get_changed_files,
)

# Diff utilities
from opencommit.git.diff import (
    get_staged_diff,
    DIFF_EXCLUDE_MARKERS,
    ONLY_EXCLUDED_FILES_DIFF,
)

# Index, commit and remote operations
from opencommit.git.index import stage_files
from opencommit.git.commit import create_commit
from opencommit.git.remote import get_remotes, push_to_remote

# Repository facade
from opencommit.git.repository import GitRepository, open_repo


__all__ = [
    # Exceptions
    "GitError",
    "NotARepositoryError",
    "NoChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Ignore
    "DEFAULT_IGNORE_PATTERNS",
    "IGNORE_FILE_NAME",
    "load_ignore_patterns",
    "should_ignore",
    # Status
    "get_status_entries",
    "get_staged_files",
    "get_changed_files",
    # Diff
    "get_staged_diff",
    "DIFF_EXCLUDE_MARKERS",
    "ONLY_EXCLUDED_FILES_DIFF",
    # Index / commit / remote
    "stage_files",
    "create_commit",
    "get_remotes",
    "push_to_remote",
    # Repository
    "GitRepository",
    "open_repo",
]
