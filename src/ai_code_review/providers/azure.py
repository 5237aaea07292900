# src/ai_code_review/providers/azure.py
from openai import AsyncAzureOpenAI
from .openai import OpenAIProvider


class AzureOpenAIProvider(OpenAIProvider):
    """Same wire contract as OpenAIProvider, routed through an Azure deployment."""

    def _create_client(self, api_key: str) -> AsyncAzureOpenAI:
        return AsyncAzureOpenAI(
            api_key=api_key,
            azure_endpoint=self.config.endpoint,
            api_version=self.config.azure_api_version,
            azure_deployment=self.config.azure_deployment,
        )
