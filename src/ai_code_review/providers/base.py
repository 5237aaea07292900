# src/ai_code_review/providers/base.py
from abc import ABC, abstractmethod


class LLMProvider(ABC):
    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """Send prompt to the chat-completion endpoint and return the generated text."""
        pass
