"""Configuration for opencommit.

The resolved configuration is assembled once per invocation from:
1. Built-in defaults
2. ~/.opencommit/config.yaml
3. A .env file in the working directory (loaded into the environment)
4. OCO_* environment variables

Use 'oco config' commands to modify the persisted settings.
"""

import logging
import os
from enum import Enum
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from opencommit import global_config
from opencommit.i18n import get_supported_languages, is_language_supported

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the persisted or environment configuration is invalid."""

    pass


class AiProvider(Enum):
    """Supported AI providers."""

    OPENAI = "openai"
    AZURE = "azure"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"
    GROQ = "groq"
    MISTRAL = "mistral"
    DEEPSEEK = "deepseek"
    OLLAMA = "ollama"
    MLX = "mlx"
    TEST = "test"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_PROVIDER = AiProvider.OPENAI
DEFAULT_TOKENS_MAX_INPUT = 40960
DEFAULT_TOKENS_MAX_OUTPUT = 4096
DEFAULT_LANGUAGE = "en"
DEFAULT_MESSAGE_TEMPLATE_PLACEHOLDER = "$msg"

ENV_PREFIX = "OCO_"

DEFAULT_MODELS = {
    AiProvider.OPENAI: "gpt-4o-mini",
    AiProvider.AZURE: "gpt-4o-mini",
    AiProvider.ANTHROPIC: "claude-3-5-sonnet-20240620",
    AiProvider.GEMINI: "gemini-1.5-flash",
    AiProvider.GROQ: "llama3-70b-8192",
    AiProvider.MISTRAL: "mistral-small-latest",
    AiProvider.DEEPSEEK: "deepseek-chat",
    AiProvider.OLLAMA: "mistral",
    AiProvider.MLX: "default",
    AiProvider.TEST: "test",
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

# Consulted only when OCO_API_KEY / api_key is not set
API_KEY_ENV_VARS = {
    AiProvider.OPENAI: "OPENAI_API_KEY",
    AiProvider.AZURE: "AZURE_OPENAI_API_KEY",
    AiProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    AiProvider.GEMINI: "GEMINI_API_KEY",
    AiProvider.GROQ: "GROQ_API_KEY",
    AiProvider.MISTRAL: "MISTRAL_API_KEY",
    AiProvider.DEEPSEEK: "DEEPSEEK_API_KEY",
}

# Providers that run locally or offline and never need credentials
NO_KEY_PROVIDERS = frozenset({AiProvider.OLLAMA, AiProvider.MLX, AiProvider.TEST})


class ResolvedConfig(BaseModel):
    """Immutable configuration snapshot consumed by the commit workflow."""

    model_config = ConfigDict(frozen=True)

    ai_provider: AiProvider = DEFAULT_PROVIDER
    model: str = DEFAULT_MODELS[DEFAULT_PROVIDER]
    api_key: Optional[str] = None
    api_url: Optional[str] = None
    tokens_max_input: int = Field(default=DEFAULT_TOKENS_MAX_INPUT, gt=0)
    tokens_max_output: int = Field(default=DEFAULT_TOKENS_MAX_OUTPUT, gt=0)
    description: bool = False
    emoji: bool = False
    one_line_commit: bool = False
    why: bool = False
    language: str = DEFAULT_LANGUAGE
    message_template_placeholder: str = DEFAULT_MESSAGE_TEMPLATE_PLACEHOLDER
    gitpush: bool = True

    @field_validator("ai_provider", mode="before")
    @classmethod
    def normalize_provider(cls, v):
        """Accept provider names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("api_key", "api_url", mode="before")
    @classmethod
    def blank_is_unset(cls, v):
        """Treat empty strings as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("api_url")
    @classmethod
    def api_url_must_be_http(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the API URL uses an http(s) scheme."""
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("API URL must start with http:// or https://")
        return v

    @field_validator("message_template_placeholder")
    @classmethod
    def placeholder_must_start_with_dollar(cls, v: str) -> str:
        """Ensure the message template placeholder is usable."""
        if not v or not v.startswith("$"):
            raise ValueError("Message template placeholder must start with $")
        return v

    @field_validator("language")
    @classmethod
    def language_must_be_supported(cls, v: str) -> str:
        """Ensure a translation exists for the language."""
        if not is_language_supported(v):
            supported = ", ".join(get_supported_languages())
            raise ValueError(f"Unsupported language: {v} (supported: {supported})")
        return v

    @property
    def requires_api_key(self) -> bool:
        """Whether the configured provider needs credentials."""
        return self.ai_provider not in NO_KEY_PROVIDERS


CONFIG_KEYS = list(ResolvedConfig.model_fields)


def env_var_for_key(key: str) -> str:
    """Get the environment variable that overrides a configuration key.

    Args:
        key: The configuration key (e.g., "ai_provider").

    Returns:
        The environment variable name (e.g., "OCO_AI_PROVIDER").
    """
    return f"{ENV_PREFIX}{key.upper()}"


def normalize_key(key: str) -> str:
    """Map a user-supplied key (OCO_MODEL, model, MODEL) to a config key.

    Raises:
        ConfigError: If the key is unknown.
    """
    normalized = key.strip().lower()
    if normalized.startswith(ENV_PREFIX.lower()):
        normalized = normalized[len(ENV_PREFIX):]
    if normalized not in CONFIG_KEYS:
        raise ConfigError(f"Unknown config key: {key}")
    return normalized


def default_model_for_provider(provider: AiProvider) -> str:
    """Get the default model for a provider."""
    return DEFAULT_MODELS.get(provider, DEFAULT_MODELS[DEFAULT_PROVIDER])


def _read_env_overrides() -> dict:
    """Collect OCO_* overrides from the environment."""
    overrides = {}
    for key in CONFIG_KEYS:
        value = os.getenv(env_var_for_key(key))
        if value is not None:
            overrides[key] = value
    return overrides


def build_config(values: dict) -> ResolvedConfig:
    """Validate raw configuration values into a ResolvedConfig.

    Fills in the provider's default model and the provider-specific API key
    environment variable when they are not set explicitly.

    Raises:
        ConfigError: If any value is invalid.
    """
    values = {k: v for k, v in values.items() if k in CONFIG_KEYS}

    try:
        provider = AiProvider(str(values.get("ai_provider", DEFAULT_PROVIDER.value)).strip().lower())
    except ValueError:
        provider = None

    if provider is not None:
        if not values.get("model"):
            values["model"] = default_model_for_provider(provider)
        if not values.get("api_key") and provider in API_KEY_ENV_VARS:
            fallback_key = os.getenv(API_KEY_ENV_VARS[provider])
            if fallback_key:
                logger.debug("Using API key from %s", API_KEY_ENV_VARS[provider])
                values["api_key"] = fallback_key

    try:
        return ResolvedConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}")


def load_config() -> ResolvedConfig:
    """Load the configuration snapshot for this invocation.

    This should be called once by the CLI before running the workflow;
    the returned snapshot is passed down explicitly.

    Returns:
        The resolved, validated configuration.

    Raises:
        ConfigError: If the configuration file or an override is invalid.
    """
    load_dotenv()

    try:
        values = dict(global_config.load_global_config())
    except global_config.GlobalConfigError as e:
        raise ConfigError(str(e))

    values.update(_read_env_overrides())
    config = build_config(values)
    logger.debug(
        "Loaded config: provider=%s model=%s language=%s",
        config.ai_provider.value,
        config.model,
        config.language,
    )
    return config
