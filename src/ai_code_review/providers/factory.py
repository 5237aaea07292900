# src/ai_code_review/providers/factory.py
import logging
from .base import LLMProvider
from .openai import OpenAIProvider
from .azure import AzureOpenAIProvider
from ai_code_review.models.config import ChatConfig


logger = logging.getLogger(__name__)


def create_provider(api_key: str, config: ChatConfig) -> LLMProvider:
    """Pick the chat-completion backend; Azure needs both version and deployment."""
    if config.is_azure:
        logger.info(f"Using Azure OpenAI deployment {config.azure_deployment}")
        return AzureOpenAIProvider(api_key=api_key, config=config)
    return OpenAIProvider(api_key=api_key, config=config)
