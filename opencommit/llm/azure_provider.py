"""Azure OpenAI provider implementation."""

from openai import AzureOpenAI

from opencommit.llm.base import REQUEST_TIMEOUT
from opencommit.llm.exceptions import AiProviderError
from opencommit.llm.openai_provider import OpenAIEngine

AZURE_API_VERSION = "2024-06-01"


class AzureOpenAIEngine(OpenAIEngine):
    """Azure OpenAI engine.

    The configured api_url is the resource endpoint and the model is the
    deployment name.
    """

    provider_name = "Azure OpenAI"

    def _create_client(self) -> AzureOpenAI:
        if not self.config.base_url:
            raise AiProviderError("Azure OpenAI requires api_url to be set to the resource endpoint")

        return AzureOpenAI(
            api_key=self.config.api_key,
            azure_endpoint=self.config.base_url,
            api_version=AZURE_API_VERSION,
            timeout=REQUEST_TIMEOUT,
            max_retries=0,
        )
