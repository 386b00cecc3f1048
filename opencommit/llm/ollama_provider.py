"""Ollama provider implementation.

Talks to a locally running Ollama server over its native chat API.
No API key is needed.
"""

from typing import Optional

import httpx

from opencommit.llm.base import REQUEST_TIMEOUT, TEMPERATURE, TOP_P, BaseEngine, Message
from opencommit.llm.exceptions import AiProviderError


class OllamaEngine(BaseEngine):
    """Ollama engine."""

    provider_name = "Ollama"
    default_base_url = "http://localhost:11434"

    def _complete(self, messages: list[Message]) -> Optional[str]:
        base_url = (self.config.base_url or self.default_base_url).rstrip("/")
        payload = {
            "model": self.config.model,
            "messages": [m.to_dict() for m in messages],
            "stream": False,
            "options": {
                "temperature": TEMPERATURE,
                "top_p": TOP_P,
                "num_predict": self.config.max_tokens_output,
            },
        }

        try:
            response = httpx.post(f"{base_url}/api/chat", json=payload, timeout=REQUEST_TIMEOUT)
        except httpx.HTTPError as e:
            raise AiProviderError(f"Ollama error: {e}")

        if not response.is_success:
            raise AiProviderError(f"Ollama error: {response.text}")

        try:
            body = response.json()
        except ValueError:
            raise AiProviderError(f"Ollama error: response is not JSON: {response.text[:200]}")

        if not isinstance(body, dict):
            raise AiProviderError("Ollama error: unexpected response body")
        return (body.get("message") or {}).get("content")
