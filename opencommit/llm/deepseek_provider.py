"""DeepSeek provider implementation (OpenAI-compatible endpoint)."""

from opencommit.llm.openai_provider import OpenAIEngine


class DeepSeekEngine(OpenAIEngine):
    """DeepSeek engine."""

    provider_name = "DeepSeek"
    default_base_url = "https://api.deepseek.com/v1"
