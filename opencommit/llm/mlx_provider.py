"""MLX provider implementation.

Talks to a local `mlx_lm.server` process through its OpenAI-compatible
chat completions endpoint. No API key is needed.
"""

from typing import Optional

import httpx

from opencommit.llm.base import REQUEST_TIMEOUT, TEMPERATURE, TOP_P, BaseEngine, Message
from opencommit.llm.exceptions import AiProviderError


class MLXEngine(BaseEngine):
    """MLX engine."""

    provider_name = "MLX"
    default_base_url = "http://localhost:8080"

    def _complete(self, messages: list[Message]) -> Optional[str]:
        base_url = (self.config.base_url or self.default_base_url).rstrip("/")
        payload = {
            "model": self.config.model,
            "messages": [m.to_dict() for m in messages],
            "temperature": TEMPERATURE,
            "top_p": TOP_P,
            "max_tokens": self.config.max_tokens_output,
            "stream": False,
        }

        try:
            response = httpx.post(f"{base_url}/v1/chat/completions", json=payload, timeout=REQUEST_TIMEOUT)
        except httpx.HTTPError as e:
            raise AiProviderError(f"MLX error: {e}")

        if not response.is_success:
            raise AiProviderError(f"MLX error: {response.text}")

        try:
            body = response.json()
        except ValueError:
            raise AiProviderError(f"MLX error: response is not JSON: {response.text[:200]}")

        if not isinstance(body, dict):
            raise AiProviderError("MLX error: unexpected response body")
        choices = body.get("choices") or []
        if not choices:
            return None
        return ((choices[0] or {}).get("message") or {}).get("content")
