"""Google Gemini provider implementation."""

from typing import Optional

import httpx
from google import genai
from google.genai import errors, types

from opencommit.llm.base import (
    REQUEST_TIMEOUT,
    TEMPERATURE,
    TOP_P,
    BaseEngine,
    Message,
    fold_exemplar_into_system,
)
from opencommit.llm.exceptions import AiProviderError


class GeminiEngine(BaseEngine):
    """Google Gemini engine using the google-genai SDK."""

    provider_name = "Gemini"

    def _complete(self, messages: list[Message]) -> Optional[str]:
        # HttpOptions takes the timeout in milliseconds
        http_options = types.HttpOptions(
            timeout=int(REQUEST_TIMEOUT * 1000),
            base_url=self.config.base_url,
        )
        client = genai.Client(api_key=self.config.api_key, http_options=http_options)

        system, conversation = fold_exemplar_into_system(messages)
        contents = [
            types.Content(
                role="model" if m.role == "assistant" else "user",
                parts=[types.Part(text=m.content)],
            )
            for m in conversation
        ]

        try:
            response = client.models.generate_content(
                model=self.config.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    system_instruction=system,
                    temperature=TEMPERATURE,
                    top_p=TOP_P,
                    max_output_tokens=self.config.max_tokens_output,
                ),
            )
        except errors.APIError as e:
            raise AiProviderError(f"Gemini error: {e.message or e}")
        except httpx.HTTPError as e:
            raise AiProviderError(f"Gemini error: {e}")

        if not response.candidates:
            return None
        return response.text
