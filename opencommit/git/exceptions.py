"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for failed git commands
- NotARepositoryError: Raised outside of a git repository
- NoChangesError: Raised when there is nothing to commit
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class NoChangesError(GitError):
    """Raised when there are no staged or stageable changes."""

    pass
