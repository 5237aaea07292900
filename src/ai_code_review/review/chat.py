# src/ai_code_review/review/chat.py
import logging
import time
from ai_code_review.models.config import ChatConfig
from ai_code_review.providers.base import LLMProvider
from ai_code_review.providers.factory import create_provider
from .prompts import NO_TITLE, build_review_prompt, classify_title


logger = logging.getLogger(__name__)


class Reviewer:
    """Reviews a single patch through a chat-completion provider.

    The provider is chosen once, from the injected config, when the reviewer
    is built. Provider errors are not caught here.
    """

    def __init__(
        self,
        api_key: str,
        config: ChatConfig | None = None,
        provider: LLMProvider | None = None,
    ):
        self.config = config or ChatConfig()
        self.provider = provider or create_provider(api_key, self.config)

    def build_prompt(self, patch: str, pr_title: str) -> str:
        title = pr_title or NO_TITLE
        return build_review_prompt(
            title=title,
            patch=patch,
            language=self.config.language,
            extra_guidelines=self.config.prompt,
            category=classify_title(title),
        )

    async def review(self, patch: str, pr_title: str) -> str:
        if not patch:
            return ""

        prompt = self.build_prompt(patch, pr_title)

        started = time.perf_counter()
        text = await self.provider.complete(prompt)
        logger.info(f"code-review cost: {time.perf_counter() - started:.2f}s")

        return text
