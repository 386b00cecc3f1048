"""Tests for engine modules and the get_engine factory."""

from unittest.mock import MagicMock

import anthropic
import httpx
import openai
import pytest

from opencommit.llm import get_engine
from opencommit.llm.base import EngineConfig, Message
from opencommit.llm.exceptions import (
    AiProviderError,
    EmptyCommitMessageError,
    MissingAPIKeyError,
)


def _engine_config(**overrides):
    values = {"model": "some-model", "max_tokens_input": 40960, "max_tokens_output": 500, "api_key": "key-123"}
    values.update(overrides)
    return EngineConfig(**values)


def _prompt():
    return [
        Message.system("system text"),
        Message.user("example diff"),
        Message.assistant("fix: example"),
    ]


def _status_error(error_cls, status, body):
    request = httpx.Request("POST", "https://api.example.com")
    response = httpx.Response(status, text=body, request=request)
    return error_cls(body, response=response, body=None)


def _chat_response(content):
    response = MagicMock()
    response.choices = [MagicMock()] if content is not None else []
    if content is not None:
        response.choices[0].message.content = content
    return response


class TestGetEngine:
    """Tests for get_engine factory function."""

    @pytest.mark.parametrize(
        "provider,module,class_name",
        [
            ("openai", "opencommit.llm.openai_provider", "OpenAIEngine"),
            ("azure", "opencommit.llm.azure_provider", "AzureOpenAIEngine"),
            ("anthropic", "opencommit.llm.anthropic_provider", "AnthropicEngine"),
            ("gemini", "opencommit.llm.google_provider", "GeminiEngine"),
            ("groq", "opencommit.llm.groq_provider", "GroqEngine"),
            ("mistral", "opencommit.llm.mistral_provider", "MistralEngine"),
            ("deepseek", "opencommit.llm.deepseek_provider", "DeepSeekEngine"),
            ("ollama", "opencommit.llm.ollama_provider", "OllamaEngine"),
            ("mlx", "opencommit.llm.mlx_provider", "MLXEngine"),
            ("test", "opencommit.llm.deterministic_provider", "DeterministicEngine"),
        ],
    )
    def test_returns_engine_for_provider(self, make_config, provider, module, class_name):
        """Test each provider maps to its engine class."""
        import importlib

        engine = get_engine(make_config(ai_provider=provider, api_key="key-123"))

        assert type(engine) is getattr(importlib.import_module(module), class_name)

    def test_passes_config_through(self, make_config):
        """Test the engine receives the model, budgets and URL."""
        engine = get_engine(
            make_config(
                ai_provider="ollama",
                model="llama3",
                tokens_max_input=2000,
                tokens_max_output=100,
                api_url="http://gpu-box:11434",
            )
        )

        assert engine.config.model == "llama3"
        assert engine.config.max_tokens_input == 2000
        assert engine.config.max_tokens_output == 100
        assert engine.config.base_url == "http://gpu-box:11434"
        assert engine.budget.limit == 1900

    def test_missing_key_raises(self, make_config):
        """Test hosted providers need an API key."""
        with pytest.raises(MissingAPIKeyError, match="openai"):
            get_engine(make_config(ai_provider="openai"))

    @pytest.mark.parametrize("provider", ["ollama", "mlx", "test"])
    def test_local_providers_without_key(self, make_config, provider):
        """Test local providers work without a key."""
        assert get_engine(make_config(ai_provider=provider)) is not None


class TestOpenAIEngine:
    """Tests for OpenAIEngine."""

    def test_request_parameters(self, mocker):
        """Test the request uses deterministic sampling and the output cap."""
        from opencommit.llm.openai_provider import OpenAIEngine

        client_cls = mocker.patch("opencommit.llm.openai_provider.OpenAI")
        client = client_cls.return_value
        client.chat.completions.create.return_value = _chat_response("feat: add login")

        result = OpenAIEngine(_engine_config()).generate_commit_message(_prompt(), "real diff")

        assert result == "feat: add login"
        client_cls.assert_called_once_with(
            api_key="key-123",
            base_url="https://api.openai.com/v1",
            timeout=120.0,
            max_retries=0,
        )
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "some-model"
        assert kwargs["temperature"] == 0.0
        assert kwargs["top_p"] == 0.1
        assert kwargs["max_tokens"] == 500
        assert kwargs["messages"] == [
            {"role": "system", "content": "system text"},
            {"role": "assistant", "content": "fix: example"},
            {"role": "user", "content": "real diff"},
        ]

    def test_custom_base_url(self, mocker):
        """Test a configured base URL replaces the default."""
        from opencommit.llm.openai_provider import OpenAIEngine

        client_cls = mocker.patch("opencommit.llm.openai_provider.OpenAI")
        client_cls.return_value.chat.completions.create.return_value = _chat_response("fix: x")

        OpenAIEngine(_engine_config(base_url="http://proxy/v1")).generate_commit_message(_prompt(), "d")

        assert client_cls.call_args.kwargs["base_url"] == "http://proxy/v1"

    def test_status_error_carries_body(self, mocker):
        """Test a non-success response becomes AiProviderError with the body."""
        from opencommit.llm.openai_provider import OpenAIEngine

        client_cls = mocker.patch("opencommit.llm.openai_provider.OpenAI")
        client_cls.return_value.chat.completions.create.side_effect = _status_error(
            openai.APIStatusError, 429, '{"error": "rate limited"}'
        )

        with pytest.raises(AiProviderError, match="OpenAI error: .*rate limited"):
            OpenAIEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_connection_error(self, mocker):
        """Test transport failures become AiProviderError."""
        from opencommit.llm.openai_provider import OpenAIEngine

        client_cls = mocker.patch("opencommit.llm.openai_provider.OpenAI")
        client_cls.return_value.chat.completions.create.side_effect = openai.APIConnectionError(
            request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        )

        with pytest.raises(AiProviderError):
            OpenAIEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    @pytest.mark.parametrize("content", [None, ""])
    def test_empty_response(self, mocker, content):
        """Test missing choices or empty content raise EmptyCommitMessageError."""
        from opencommit.llm.openai_provider import OpenAIEngine

        client_cls = mocker.patch("opencommit.llm.openai_provider.OpenAI")
        client_cls.return_value.chat.completions.create.return_value = _chat_response(content)

        with pytest.raises(EmptyCommitMessageError):
            OpenAIEngine(_engine_config()).generate_commit_message(_prompt(), "d")


class TestOpenAICompatibleEngines:
    """Tests for engines built on the OpenAI client."""

    @pytest.mark.parametrize(
        "module,class_name,base_url",
        [
            ("opencommit.llm.mistral_provider", "MistralEngine", "https://api.mistral.ai/v1"),
            ("opencommit.llm.deepseek_provider", "DeepSeekEngine", "https://api.deepseek.com/v1"),
        ],
    )
    def test_default_base_url(self, mocker, module, class_name, base_url):
        """Test each provider's default endpoint."""
        import importlib

        client_cls = mocker.patch("opencommit.llm.openai_provider.OpenAI")
        client_cls.return_value.chat.completions.create.return_value = _chat_response("fix: y")
        engine_cls = getattr(importlib.import_module(module), class_name)

        assert engine_cls(_engine_config()).generate_commit_message(_prompt(), "d") == "fix: y"
        assert client_cls.call_args.kwargs["base_url"] == base_url

    def test_azure_uses_endpoint(self, mocker):
        """Test Azure is built from the configured endpoint."""
        from opencommit.llm.azure_provider import AZURE_API_VERSION, AzureOpenAIEngine

        client_cls = mocker.patch("opencommit.llm.azure_provider.AzureOpenAI")
        client_cls.return_value.chat.completions.create.return_value = _chat_response("fix: z")

        engine = AzureOpenAIEngine(_engine_config(base_url="https://my-resource.openai.azure.com"))

        assert engine.generate_commit_message(_prompt(), "d") == "fix: z"
        kwargs = client_cls.call_args.kwargs
        assert kwargs["azure_endpoint"] == "https://my-resource.openai.azure.com"
        assert kwargs["api_version"] == AZURE_API_VERSION

    def test_azure_requires_endpoint(self, mocker):
        """Test Azure without an endpoint fails before any request."""
        from opencommit.llm.azure_provider import AzureOpenAIEngine

        client_cls = mocker.patch("opencommit.llm.azure_provider.AzureOpenAI")

        with pytest.raises(AiProviderError, match="api_url"):
            AzureOpenAIEngine(_engine_config()).generate_commit_message(_prompt(), "d")
        client_cls.assert_not_called()


class TestGroqEngine:
    """Tests for GroqEngine."""

    def test_generate(self, mocker):
        """Test a successful request."""
        from opencommit.llm.groq_provider import GroqEngine

        client_cls = mocker.patch("opencommit.llm.groq_provider.Groq")
        client_cls.return_value.chat.completions.create.return_value = _chat_response("chore: bump")

        assert GroqEngine(_engine_config()).generate_commit_message(_prompt(), "d") == "chore: bump"
        assert client_cls.call_args.kwargs["max_retries"] == 0
        assert client_cls.return_value.chat.completions.create.call_args.kwargs["top_p"] == 0.1

    def test_status_error(self, mocker):
        """Test API errors become AiProviderError."""
        import groq

        from opencommit.llm.groq_provider import GroqEngine

        client_cls = mocker.patch("opencommit.llm.groq_provider.Groq")
        client_cls.return_value.chat.completions.create.side_effect = _status_error(
            groq.APIStatusError, 500, "upstream down"
        )

        with pytest.raises(AiProviderError, match="upstream down"):
            GroqEngine(_engine_config()).generate_commit_message(_prompt(), "d")


class TestAnthropicEngine:
    """Tests for AnthropicEngine."""

    def test_folds_exemplar_into_system(self, mocker):
        """Test the conversation starts with the diff as a user turn."""
        from opencommit.llm.anthropic_provider import AnthropicEngine

        client_cls = mocker.patch("opencommit.llm.anthropic_provider.Anthropic")
        response = MagicMock()
        response.content = [MagicMock(type="text", text="docs: update readme")]
        client_cls.return_value.messages.create.return_value = response

        result = AnthropicEngine(_engine_config()).generate_commit_message(_prompt(), "real diff")

        assert result == "docs: update readme"
        kwargs = client_cls.return_value.messages.create.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "real diff"}]
        assert kwargs["system"].startswith("system text")
        assert "fix: example" in kwargs["system"]
        assert kwargs["max_tokens"] == 500
        assert kwargs["temperature"] == 0.0
        assert "top_p" not in kwargs

    def test_empty_content(self, mocker):
        """Test a response without text blocks."""
        from opencommit.llm.anthropic_provider import AnthropicEngine

        client_cls = mocker.patch("opencommit.llm.anthropic_provider.Anthropic")
        client_cls.return_value.messages.create.return_value = MagicMock(content=[])

        with pytest.raises(EmptyCommitMessageError):
            AnthropicEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_status_error(self, mocker):
        """Test API errors become AiProviderError."""
        from opencommit.llm.anthropic_provider import AnthropicEngine

        client_cls = mocker.patch("opencommit.llm.anthropic_provider.Anthropic")
        client_cls.return_value.messages.create.side_effect = _status_error(
            anthropic.APIStatusError, 401, "invalid x-api-key"
        )

        with pytest.raises(AiProviderError, match="Anthropic error: invalid x-api-key"):
            AnthropicEngine(_engine_config()).generate_commit_message(_prompt(), "d")


class TestGeminiEngine:
    """Tests for GeminiEngine."""

    def test_generate(self, mocker):
        """Test the request contents and config."""
        from opencommit.llm.google_provider import GeminiEngine

        client_cls = mocker.patch("opencommit.llm.google_provider.genai.Client")
        response = MagicMock()
        response.candidates = [MagicMock()]
        response.text = "refactor: split module"
        client_cls.return_value.models.generate_content.return_value = response

        result = GeminiEngine(_engine_config()).generate_commit_message(_prompt(), "real diff")

        assert result == "refactor: split module"
        kwargs = client_cls.return_value.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "some-model"
        assert len(kwargs["contents"]) == 1
        assert kwargs["contents"][0].role == "user"
        assert kwargs["contents"][0].parts[0].text == "real diff"
        assert "fix: example" in kwargs["config"].system_instruction
        assert kwargs["config"].max_output_tokens == 500

    def test_no_candidates(self, mocker):
        """Test an answer without candidates."""
        from opencommit.llm.google_provider import GeminiEngine

        client_cls = mocker.patch("opencommit.llm.google_provider.genai.Client")
        client_cls.return_value.models.generate_content.return_value = MagicMock(candidates=[])

        with pytest.raises(EmptyCommitMessageError):
            GeminiEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_transport_error(self, mocker):
        """Test network failures become AiProviderError."""
        from opencommit.llm.google_provider import GeminiEngine

        client_cls = mocker.patch("opencommit.llm.google_provider.genai.Client")
        client_cls.return_value.models.generate_content.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(AiProviderError, match="timed out"):
            GeminiEngine(_engine_config()).generate_commit_message(_prompt(), "d")


class TestLocalEngines:
    """Tests for the Ollama and MLX engines."""

    def test_ollama_request(self, mocker):
        """Test the Ollama chat payload."""
        from opencommit.llm.ollama_provider import OllamaEngine

        post = mocker.patch(
            "opencommit.llm.ollama_provider.httpx.post",
            return_value=httpx.Response(200, json={"message": {"role": "assistant", "content": "fix: a"}}),
        )

        result = OllamaEngine(_engine_config(api_key=None)).generate_commit_message(_prompt(), "real diff")

        assert result == "fix: a"
        url = post.call_args.args[0]
        payload = post.call_args.kwargs["json"]
        assert url == "http://localhost:11434/api/chat"
        assert payload["stream"] is False
        assert payload["options"] == {"temperature": 0.0, "top_p": 0.1, "num_predict": 500}
        assert payload["messages"][-1] == {"role": "user", "content": "real diff"}

    def test_ollama_error_body(self, mocker):
        """Test the error body is reported."""
        from opencommit.llm.ollama_provider import OllamaEngine

        mocker.patch(
            "opencommit.llm.ollama_provider.httpx.post",
            return_value=httpx.Response(404, text='{"error":"model not found"}'),
        )

        with pytest.raises(AiProviderError, match="model not found"):
            OllamaEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_ollama_unreachable(self, mocker):
        """Test a refused connection becomes AiProviderError."""
        from opencommit.llm.ollama_provider import OllamaEngine

        mocker.patch(
            "opencommit.llm.ollama_provider.httpx.post",
            side_effect=httpx.ConnectError("connection refused"),
        )

        with pytest.raises(AiProviderError, match="connection refused"):
            OllamaEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_mlx_request(self, mocker):
        """Test the MLX server endpoint and payload."""
        from opencommit.llm.mlx_provider import MLXEngine

        post = mocker.patch(
            "opencommit.llm.mlx_provider.httpx.post",
            return_value=httpx.Response(200, json={"choices": [{"message": {"content": "test: add"}}]}),
        )

        engine = MLXEngine(_engine_config(base_url="http://127.0.0.1:9000/"))

        assert engine.generate_commit_message(_prompt(), "d") == "test: add"
        assert post.call_args.args[0] == "http://127.0.0.1:9000/v1/chat/completions"
        assert post.call_args.kwargs["json"]["max_tokens"] == 500

    def test_mlx_no_choices(self, mocker):
        """Test an answer without choices."""
        from opencommit.llm.mlx_provider import MLXEngine

        mocker.patch(
            "opencommit.llm.mlx_provider.httpx.post",
            return_value=httpx.Response(200, json={"choices": []}),
        )

        with pytest.raises(EmptyCommitMessageError):
            MLXEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_ollama_null_message(self, mocker):
        """Test a null message field counts as an empty answer."""
        from opencommit.llm.ollama_provider import OllamaEngine

        mocker.patch(
            "opencommit.llm.ollama_provider.httpx.post",
            return_value=httpx.Response(200, json={"message": None, "done": True}),
        )

        with pytest.raises(EmptyCommitMessageError):
            OllamaEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_ollama_non_json_body(self, mocker):
        """Test a success status with an HTML body becomes AiProviderError."""
        from opencommit.llm.ollama_provider import OllamaEngine

        mocker.patch(
            "opencommit.llm.ollama_provider.httpx.post",
            return_value=httpx.Response(200, text="<html>Bad Gateway</html>"),
        )

        with pytest.raises(AiProviderError, match="not JSON"):
            OllamaEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_mlx_null_message(self, mocker):
        """Test a choice without a message counts as an empty answer."""
        from opencommit.llm.mlx_provider import MLXEngine

        mocker.patch(
            "opencommit.llm.mlx_provider.httpx.post",
            return_value=httpx.Response(200, json={"choices": [{"message": None}]}),
        )

        with pytest.raises(EmptyCommitMessageError):
            MLXEngine(_engine_config()).generate_commit_message(_prompt(), "d")

    def test_mlx_non_json_body(self, mocker):
        """Test a body that is not JSON becomes AiProviderError."""
        from opencommit.llm.mlx_provider import MLXEngine

        mocker.patch(
            "opencommit.llm.mlx_provider.httpx.post",
            return_value=httpx.Response(200, text="upstream timeout"),
        )

        with pytest.raises(AiProviderError, match="MLX error: response is not JSON"):
            MLXEngine(_engine_config()).generate_commit_message(_prompt(), "d")
