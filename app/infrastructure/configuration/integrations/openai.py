"""OpenAI integration settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import IntegrationSettings


class OpenAISettings(IntegrationSettings):
    """Chat completions API used for suggestions and translations.

    Environment Variables:
        OPENAI_API_KEY: API key; suggestions fail and translations fall back without it
        OPENAI_MODEL: Model name (default: gpt-4o-mini)
        OPENAI_API_URL: Chat completions endpoint
        OPENAI_TIMEOUT_SECONDS: Per-call timeout
        TRANSLATION_MAX_WORKERS: Concurrent translation calls per publish

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.openai.is_configured:
            model = settings.openai.OPENAI_MODEL
        ```
    """

    OPENAI_API_KEY: Optional[str] = Field(default=None, alias="OPENAI_API_KEY")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    OPENAI_API_URL: str = Field(
        default="https://api.openai.com/v1/chat/completions", alias="OPENAI_API_URL"
    )
    OPENAI_TIMEOUT_SECONDS: float = Field(default=20.0, alias="OPENAI_TIMEOUT_SECONDS")
    TRANSLATION_MAX_WORKERS: int = Field(default=4, alias="TRANSLATION_MAX_WORKERS")

    @field_validator("OPENAI_API_KEY", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v):
        """Treat an empty or whitespace key as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_configured(self) -> bool:
        return bool(self.OPENAI_API_KEY)
