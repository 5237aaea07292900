# tests/integration/test_openai_provider.py
import pytest
from unittest.mock import AsyncMock, MagicMock
from ai_code_review.models.config import ChatConfig
from ai_code_review.providers.openai import OpenAIProvider
from ai_code_review.review.chat import Reviewer


def _mock_completion(*texts: str):
    """Create a mock ChatCompletion response with one choice per text."""
    choices = []
    for text in texts:
        choice = MagicMock()
        choice.message.content = text
        choices.append(choice)
    completion = MagicMock()
    completion.choices = choices
    return completion


def _provider(config: ChatConfig, completion) -> OpenAIProvider:
    provider = OpenAIProvider(api_key="test-key", config=config)
    provider.client = AsyncMock()
    provider.client.chat.completions.create = AsyncMock(return_value=completion)
    return provider


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openai_provider_returns_first_choice():
    provider = _provider(ChatConfig(), _mock_completion("First review", "Second review"))

    result = await provider.complete("Review this code")

    assert result == "First review"
    provider.client.chat.completions.create.assert_called_once()
    call_kwargs = provider.client.chat.completions.create.call_args.kwargs
    assert call_kwargs["messages"] == [{"role": "user", "content": "Review this code"}]
    assert call_kwargs["model"] == "gpt-3.5-turbo"
    assert call_kwargs["temperature"] == 1
    assert call_kwargs["top_p"] == 1
    assert "max_tokens" not in call_kwargs


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openai_provider_passes_sampling_settings():
    config = ChatConfig(model="gpt-4o-mini", temperature=0.3, top_p=0.9, max_tokens=1200)
    provider = _provider(config, _mock_completion("ok"))

    await provider.complete("Review this code")

    call_kwargs = provider.client.chat.completions.create.call_args.kwargs
    assert call_kwargs["model"] == "gpt-4o-mini"
    assert call_kwargs["temperature"] == 0.3
    assert call_kwargs["top_p"] == 0.9
    assert call_kwargs["max_tokens"] == 1200


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openai_provider_zero_choices():
    provider = _provider(ChatConfig(), _mock_completion())

    assert await provider.complete("Review this code") == ""


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openai_provider_null_content():
    provider = _provider(ChatConfig(), _mock_completion(None))

    assert await provider.complete("Review this code") == ""


@pytest.mark.integration
@pytest.mark.asyncio
async def test_reviewer_with_mocked_client():
    provider = _provider(ChatConfig(), _mock_completion("Null check looks right"))
    reviewer = Reviewer(api_key="test-key", provider=provider)

    result = await reviewer.review("+if (!user) return;", "Fix null pointer")

    assert result == "Null check looks right"
    prompt = provider.client.chat.completions.create.call_args.kwargs["messages"][0]["content"]
    assert prompt.startswith("You are an expert code reviewer")
    assert prompt.endswith("+if (!user) return;")


@pytest.mark.integration
@pytest.mark.asyncio
async def test_reviewer_zero_choices_returns_empty():
    provider = _provider(ChatConfig(), _mock_completion())
    reviewer = Reviewer(api_key="test-key", provider=provider)

    assert await reviewer.review("+x", "feat: x") == ""
