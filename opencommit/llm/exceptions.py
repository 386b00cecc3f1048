"""LLM-related exception classes.

Contains all exception classes for commit message generation:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when the provider needs an API key and none is set
- TooManyTokensError: Raised when the request exceeds the token budget
- EmptyCommitMessageError: Raised when the provider returns nothing usable
- AiProviderError: Raised when the provider answers with an error
- UnsupportedProviderError: Raised for an unknown provider
- TokenizerError: Raised when the token counter cannot be loaded
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class TooManyTokensError(LLMError):
    """Raised when a request would exceed the input token budget.

    Attributes:
        count: The number of tokens the request would have used.
    """

    def __init__(self, count: int, limit: int | None = None):
        self.count = count
        self.limit = limit
        message = f"Too many tokens in request: {count}"
        if limit is not None:
            message += f" (limit {limit})"
        super().__init__(message)


class EmptyCommitMessageError(LLMError):
    """Raised when the provider response contains no commit message."""

    def __init__(self, message: str = "The AI provider returned an empty commit message"):
        super().__init__(message)


class AiProviderError(LLMError):
    """Raised when the provider call fails or answers with a non-success status."""

    pass


class UnsupportedProviderError(LLMError):
    """Raised when no engine exists for the configured provider."""

    pass


class TokenizerError(LLMError):
    """Raised when the BPE data for token counting cannot be loaded."""

    pass
