"""OpenAI chat-completions integration used for mineral suggestions and translations."""

from integrations.openai.client import OpenAIClient
from integrations.openai.schemas import (
    MajorElement,
    MineralSuggestion,
    MineralTranslation,
)

__all__ = [
    "OpenAIClient",
    "MajorElement",
    "MineralSuggestion",
    "MineralTranslation",
]
