# src/ai_code_review/providers/__init__.py
from .base import LLMProvider
from .openai import OpenAIProvider
from .azure import AzureOpenAIProvider
from .factory import create_provider

__all__ = ["LLMProvider", "OpenAIProvider", "AzureOpenAIProvider", "create_provider"]
