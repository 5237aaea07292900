# src/ai_code_review/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict

from ai_code_review.models.config import DEFAULT_MODEL


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True)

    # GitHub
    github_api_url: str = "https://api.github.com"
    github_token: str
    github_webhook_secret: str

    # Chat completion provider
    openai_api_key: str
    openai_api_endpoint: str | None = None
    azure_api_version: str | None = None
    azure_deployment: str | None = None

    # Review
    language: str | None = None
    model: str = DEFAULT_MODEL
    temperature: float = 1
    top_p: float = 1
    max_tokens: int | None = None
    prompt: str | None = None

    # Defaults
    reviewer_name: str = "AI Review"
    log_level: str = "INFO"
