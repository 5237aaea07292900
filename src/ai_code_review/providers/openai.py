# src/ai_code_review/providers/openai.py
import logging
from typing import Any
from openai import AsyncOpenAI
from .base import LLMProvider
from ai_code_review.models.config import ChatConfig


logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    BASE_URL = "https://api.openai.com/v1"

    def __init__(self, api_key: str, config: ChatConfig):
        self.config = config
        self.client = self._create_client(api_key)

    def _create_client(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self.config.endpoint or self.BASE_URL,
        )

    def _request_params(self, prompt: str) -> dict[str, Any]:
        params: dict[str, Any] = {
            "messages": [{"role": "user", "content": prompt}],
            "model": self.config.model,
            "temperature": self.config.temperature,
            "top_p": self.config.top_p,
        }
        if self.config.max_tokens is not None:
            params["max_tokens"] = self.config.max_tokens
        return params

    async def complete(self, prompt: str) -> str:
        response = await self.client.chat.completions.create(**self._request_params(prompt))

        if not response.choices:
            logger.warning(f"{self.config.model} returned no choices")
            return ""

        text = response.choices[0].message.content or ""
        logger.info(f"{self.config.model} response length: {len(text)} chars")
        return text
