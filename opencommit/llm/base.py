"""Base classes and shared utilities for commit message engines."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from opencommit.llm.exceptions import EmptyCommitMessageError
from opencommit.llm.tokens import TokenBudget, token_count

logger = logging.getLogger(__name__)

# Deterministic sampling so that a regenerated message differs only
# because of the model or the context, not because of sampling noise
TEMPERATURE = 0.0
TOP_P = 0.1

# Seconds to wait for a provider response
REQUEST_TIMEOUT = 120.0


@dataclass(frozen=True)
class Message:
    """One chat message."""

    role: str
    content: str

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls("system", content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls("user", content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls("assistant", content)

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class EngineConfig:
    """Settings an engine needs to talk to its provider."""

    model: str
    max_tokens_input: int
    max_tokens_output: int
    api_key: Optional[str] = None
    base_url: Optional[str] = None


def build_request_messages(messages: list[Message], diff: str) -> list[Message]:
    """Build the message sequence that is actually sent to a provider.

    Every non-user message of the assembled prompt is kept in order, and
    the real diff becomes the final user turn. The exemplar diff is never
    sent.

    Args:
        messages: The assembled prompt.
        diff: The staged diff text.

    Returns:
        The outbound message sequence.
    """
    request = [m for m in messages if m.role != "user"]
    request.append(Message.user(diff))
    return request


def fold_exemplar_into_system(messages: list[Message]) -> tuple[str, list[Message]]:
    """Split a request into a system instruction and a user-first conversation.

    Some providers reject conversations that start with an assistant turn.
    For them, assistant messages that precede the first user turn are
    appended to the system instruction as an example of the expected output.

    Returns:
        A tuple of (system instruction, remaining messages).
    """
    system_parts = []
    examples = []
    rest = []
    for message in messages:
        if message.role == "system" and not rest:
            system_parts.append(message.content)
        elif message.role == "assistant" and not rest:
            examples.append(message.content)
        else:
            rest.append(message)

    system = "\n".join(system_parts)
    if examples:
        system += "\n\nExample of a commit message in the expected format:\n" + "\n".join(examples)
    return system, rest


class BaseEngine(ABC):
    """Abstract base class for commit message engines.

    Subclasses implement `_complete`, which sends one request and returns
    the raw text of the first candidate. The shared flow (request
    assembly, the authoritative token check, empty-output detection)
    lives in `generate_commit_message`.
    """

    provider_name = "AI provider"

    def __init__(self, config: EngineConfig):
        self.config = config
        self.budget = TokenBudget(config.max_tokens_input, config.max_tokens_output, counter=self.count_tokens)

    def count_tokens(self, text: str) -> int:
        """Count the tokens of one message for the budget check."""
        return token_count(text)

    def generate_commit_message(self, messages: list[Message], diff: str) -> str:
        """Generate a commit message for a diff.

        Args:
            messages: The assembled prompt.
            diff: The staged diff text.

        Returns:
            The commit message text.

        Raises:
            TooManyTokensError: If the request exceeds the token budget.
            AiProviderError: If the provider call fails.
            EmptyCommitMessageError: If the provider returns no text.
        """
        request = build_request_messages(messages, diff)
        self.budget.check([m.content for m in request])

        logger.debug("Requesting commit message from %s (model %s)", self.provider_name, self.config.model)
        text = self._complete(request)
        if not text:
            raise EmptyCommitMessageError()
        return text

    @abstractmethod
    def _complete(self, messages: list[Message]) -> Optional[str]:
        """Send one request and return the first candidate's text.

        Args:
            messages: The outbound message sequence, ending with the diff.

        Returns:
            The generated text, or None/"" when the response had no candidate.

        Raises:
            AiProviderError: If the call fails.
        """
        pass
