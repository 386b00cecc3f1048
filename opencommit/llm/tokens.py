"""Token counting and the input token budget.

Counts use tiktoken's cl100k_base byte-pair encoding, the vocabulary of the
GPT-4 family. Other providers tokenize differently, so for them the count
is an approximation.
"""

import logging
from functools import lru_cache
from typing import Callable, Optional

import tiktoken

from opencommit.llm.exceptions import TokenizerError, TooManyTokensError

logger = logging.getLogger(__name__)

ENCODING_NAME = "cl100k_base"

# Fixed per-message cost of the chat format (role and separators)
MESSAGE_TOKEN_OVERHEAD = 4

# Average characters per cl100k_base token for English text and code
CHARS_PER_TOKEN = 4


@lru_cache(maxsize=1)
def get_encoding() -> tiktoken.Encoding:
    """Get the shared BPE encoding, loading it on first use.

    tiktoken downloads the BPE ranks on first use unless they are already
    in TIKTOKEN_CACHE_DIR.

    Raises:
        TokenizerError: If the encoding data cannot be fetched or parsed.
    """
    try:
        return tiktoken.get_encoding(ENCODING_NAME)
    except (OSError, ValueError) as e:
        # requests errors are OSError subclasses
        raise TokenizerError(f"Could not load the {ENCODING_NAME} tokenizer: {e}")


def token_count(text: str) -> int:
    """Count the tokens in a piece of text."""
    return len(get_encoding().encode(text, disallowed_special=()))


def estimate_token_count(text: str) -> int:
    """Estimate the token count from the text length alone.

    Needs no tokenizer data, so it works without network access.
    """
    return -(-len(text) // CHARS_PER_TOKEN)


class TokenBudget:
    """Input token budget for one provider request.

    A request fits when the summed token count of its messages, plus a
    fixed overhead per message, is at most max_input - max_output.
    """

    def __init__(
        self,
        max_input: int,
        max_output: int,
        counter: Optional[Callable[[str], int]] = None,
    ):
        self.max_input = max_input
        self.max_output = max_output
        self.counter = counter or token_count

    @property
    def limit(self) -> int:
        """Largest token count a request may use."""
        return self.max_input - self.max_output

    def count(self, contents: list[str]) -> int:
        """Count the tokens of a sequence of message contents."""
        return sum(self.counter(content) + MESSAGE_TOKEN_OVERHEAD for content in contents)

    def check(self, contents: list[str]) -> int:
        """Check that a sequence of message contents fits the budget.

        Args:
            contents: The content of every message that will be sent.

        Returns:
            The token count of the request.

        Raises:
            TooManyTokensError: If the count exceeds the limit.
        """
        count = self.count(contents)
        logger.debug("Request uses %d tokens (limit %d)", count, self.limit)
        if count > self.limit:
            raise TooManyTokensError(count, self.limit)
        return count
