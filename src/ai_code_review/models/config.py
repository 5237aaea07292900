from pydantic import BaseModel, ConfigDict, Field


DEFAULT_MODEL = "gpt-3.5-turbo"


class ChatConfig(BaseModel):
    """Chat-completion settings resolved once and injected into the Reviewer."""

    model_config = ConfigDict(frozen=True)

    endpoint: str | None = None
    azure_api_version: str | None = None
    azure_deployment: str | None = None
    language: str | None = None
    model: str = DEFAULT_MODEL
    temperature: float = 1
    top_p: float = 1
    max_tokens: int | None = None
    prompt: str | None = None

    @property
    def is_azure(self) -> bool:
        return bool(self.azure_api_version and self.azure_deployment)

    @classmethod
    def from_settings(cls, settings) -> "ChatConfig":
        return cls(
            endpoint=settings.openai_api_endpoint,
            azure_api_version=settings.azure_api_version,
            azure_deployment=settings.azure_deployment,
            language=settings.language,
            model=settings.model,
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
            prompt=settings.prompt,
        )


class RepoConfig(BaseModel):
    auto_review: bool = True
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(
        default_factory=lambda: [
            "*.md",
            "*.lock",
            "*.min.js",
            "*.min.css",
            "*.generated.*",
            "package-lock.json",
            "yarn.lock",
            "pnpm-lock.yaml",
        ]
    )
    max_patch_length: int | None = None
