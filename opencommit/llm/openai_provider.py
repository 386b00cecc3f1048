"""OpenAI provider implementation.

Also the base for OpenAI-compatible providers (Azure OpenAI, Mistral,
DeepSeek), which only differ in how the client is constructed.
"""

from typing import Optional

import openai
from openai import OpenAI

from opencommit.llm.base import REQUEST_TIMEOUT, TEMPERATURE, TOP_P, BaseEngine, Message
from opencommit.llm.exceptions import AiProviderError


class OpenAIEngine(BaseEngine):
    """OpenAI chat completions engine."""

    provider_name = "OpenAI"
    default_base_url = "https://api.openai.com/v1"

    def _create_client(self) -> OpenAI:
        """Create the SDK client. SDK-level retries are disabled."""
        return OpenAI(
            api_key=self.config.api_key,
            base_url=self.config.base_url or self.default_base_url,
            timeout=REQUEST_TIMEOUT,
            max_retries=0,
        )

    def _complete(self, messages: list[Message]) -> Optional[str]:
        client = self._create_client()

        try:
            response = client.chat.completions.create(
                model=self.config.model,
                messages=[m.to_dict() for m in messages],
                temperature=TEMPERATURE,
                top_p=TOP_P,
                max_tokens=self.config.max_tokens_output,
            )
        except openai.APIStatusError as e:
            raise AiProviderError(f"{self.provider_name} error: {e.response.text}")
        except openai.APIError as e:
            raise AiProviderError(f"{self.provider_name} error: {e}")

        if not response.choices:
            return None
        return response.choices[0].message.content
