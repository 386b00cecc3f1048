"""Mistral AI provider implementation (OpenAI-compatible endpoint)."""

from opencommit.llm.openai_provider import OpenAIEngine


class MistralEngine(OpenAIEngine):
    """Mistral AI engine."""

    provider_name = "Mistral"
    default_base_url = "https://api.mistral.ai/v1"
