"""Deterministic engine for tests and offline runs.

Picks a canned commit message by looking at the diff; never touches the
network, not even to fetch tokenizer data.
"""

from typing import Optional

from opencommit.llm.base import BaseEngine, Message
from opencommit.llm.tokens import estimate_token_count

PORT_FIX_MESSAGE = "fix(server.ts): change port variable case from lowercase port to uppercase PORT"
FEATURE_MESSAGE = "feat: add new feature"
FALLBACK_MESSAGE = "test(mock): test commit message"


class DeterministicEngine(BaseEngine):
    """Engine for the `test` provider."""

    provider_name = "test"

    def count_tokens(self, text: str) -> int:
        return estimate_token_count(text)

    def _complete(self, messages: list[Message]) -> Optional[str]:
        diff = messages[-1].content
        if "PORT" in diff:
            return PORT_FIX_MESSAGE
        if "feat" in diff:
            return FEATURE_MESSAGE
        return FALLBACK_MESSAGE
