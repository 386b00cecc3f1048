"""Anthropic Claude provider implementation."""

from typing import Optional

import anthropic
from anthropic import Anthropic

from opencommit.llm.base import (
    REQUEST_TIMEOUT,
    TEMPERATURE,
    BaseEngine,
    Message,
    fold_exemplar_into_system,
)
from opencommit.llm.exceptions import AiProviderError


class AnthropicEngine(BaseEngine):
    """Anthropic Claude engine.

    The Messages API takes the system prompt separately and requires the
    conversation to open with a user turn, so the exemplar answer is
    folded into the system prompt. Only temperature is sent; recent Claude
    models reject requests that set both temperature and top_p.
    """

    provider_name = "Anthropic"

    def _complete(self, messages: list[Message]) -> Optional[str]:
        client_kwargs = {
            "api_key": self.config.api_key,
            "timeout": REQUEST_TIMEOUT,
            "max_retries": 0,
        }
        if self.config.base_url:
            client_kwargs["base_url"] = self.config.base_url
        client = Anthropic(**client_kwargs)

        system, conversation = fold_exemplar_into_system(messages)

        try:
            response = client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens_output,
                system=system,
                messages=[m.to_dict() for m in conversation],
                temperature=TEMPERATURE,
            )
        except anthropic.APIStatusError as e:
            raise AiProviderError(f"Anthropic error: {e.response.text}")
        except anthropic.APIError as e:
            raise AiProviderError(f"Anthropic error: {e}")

        texts = [block.text for block in response.content if getattr(block, "type", None) == "text"]
        return "".join(texts) or None
