"""Groq provider implementation."""

from typing import Optional

import groq
from groq import Groq

from opencommit.llm.base import REQUEST_TIMEOUT, TEMPERATURE, TOP_P, BaseEngine, Message
from opencommit.llm.exceptions import AiProviderError


class GroqEngine(BaseEngine):
    """Groq chat completions engine."""

    provider_name = "Groq"

    def _complete(self, messages: list[Message]) -> Optional[str]:
        client_kwargs = {
            "api_key": self.config.api_key,
            "timeout": REQUEST_TIMEOUT,
            "max_retries": 0,
        }
        if self.config.base_url:
            client_kwargs["base_url"] = self.config.base_url
        client = Groq(**client_kwargs)

        try:
            response = client.chat.completions.create(
                model=self.config.model,
                messages=[m.to_dict() for m in messages],
                temperature=TEMPERATURE,
                top_p=TOP_P,
                max_tokens=self.config.max_tokens_output,
            )
        except groq.APIStatusError as e:
            raise AiProviderError(f"Groq error: {e.response.text}")
        except groq.APIError as e:
            raise AiProviderError(f"Groq error: {e}")

        if not response.choices:
            return None
        return response.choices[0].message.content
