"""Commit message generation engines for opencommit.

This module provides a unified interface to multiple AI providers.
The active provider comes from the resolved configuration.
"""

import logging
from typing import Callable

from opencommit.config import AiProvider, ResolvedConfig
from opencommit.llm.base import BaseEngine, EngineConfig, Message, build_request_messages
from opencommit.llm.exceptions import (
    AiProviderError,
    EmptyCommitMessageError,
    LLMError,
    MissingAPIKeyError,
    TokenizerError,
    TooManyTokensError,
    UnsupportedProviderError,
)
from opencommit.llm.tokens import estimate_token_count, token_count

logger = logging.getLogger(__name__)


def engine_config_from(config: ResolvedConfig) -> EngineConfig:
    """Extract the engine settings from a resolved configuration."""
    return EngineConfig(
        model=config.model,
        max_tokens_input=config.tokens_max_input,
        max_tokens_output=config.tokens_max_output,
        api_key=config.api_key,
        base_url=config.api_url,
    )


def token_counter_for(provider: AiProvider) -> Callable[[str], int]:
    """Get the token counter used to budget requests to a provider.

    The offline `test` provider uses a length estimate so that it never
    needs tokenizer data.
    """
    if provider == AiProvider.TEST:
        return estimate_token_count
    return token_count


def get_engine(config: ResolvedConfig) -> BaseEngine:
    """Get the engine for the configured provider.

    Provider modules are imported lazily so that only the SDK in use is
    loaded.

    Args:
        config: The resolved configuration.

    Returns:
        An engine instance for config.ai_provider.

    Raises:
        MissingAPIKeyError: If the provider needs an API key and none is set.
        UnsupportedProviderError: If the provider is not supported.
    """
    provider = config.ai_provider
    if config.requires_api_key and not config.api_key:
        raise MissingAPIKeyError(
            f"No API key configured for provider '{provider.value}'. "
            "Set it with: oco config set api_key=<your key>"
        )

    engine_config = engine_config_from(config)
    logger.debug("Using provider %s with model %s", provider.value, config.model)

    if provider == AiProvider.OPENAI:
        from opencommit.llm.openai_provider import OpenAIEngine

        return OpenAIEngine(engine_config)

    elif provider == AiProvider.AZURE:
        from opencommit.llm.azure_provider import AzureOpenAIEngine

        return AzureOpenAIEngine(engine_config)

    elif provider == AiProvider.ANTHROPIC:
        from opencommit.llm.anthropic_provider import AnthropicEngine

        return AnthropicEngine(engine_config)

    elif provider == AiProvider.GEMINI:
        from opencommit.llm.google_provider import GeminiEngine

        return GeminiEngine(engine_config)

    elif provider == AiProvider.GROQ:
        from opencommit.llm.groq_provider import GroqEngine

        return GroqEngine(engine_config)

    elif provider == AiProvider.MISTRAL:
        from opencommit.llm.mistral_provider import MistralEngine

        return MistralEngine(engine_config)

    elif provider == AiProvider.DEEPSEEK:
        from opencommit.llm.deepseek_provider import DeepSeekEngine

        return DeepSeekEngine(engine_config)

    elif provider == AiProvider.OLLAMA:
        from opencommit.llm.ollama_provider import OllamaEngine

        return OllamaEngine(engine_config)

    elif provider == AiProvider.MLX:
        from opencommit.llm.mlx_provider import MLXEngine

        return MLXEngine(engine_config)

    elif provider == AiProvider.TEST:
        from opencommit.llm.deterministic_provider import DeterministicEngine

        return DeterministicEngine(engine_config)

    else:
        raise UnsupportedProviderError(f"Unsupported provider: {provider}")


__all__ = [
    "BaseEngine",
    "EngineConfig",
    "Message",
    "build_request_messages",
    "LLMError",
    "MissingAPIKeyError",
    "TooManyTokensError",
    "EmptyCommitMessageError",
    "AiProviderError",
    "UnsupportedProviderError",
    "TokenizerError",
    "engine_config_from",
    "get_engine",
    "token_counter_for",
]
