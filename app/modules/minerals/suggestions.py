"""Suggest step: turn an uploaded photo into a draft and a pre-filled form."""

from dataclasses import dataclass
from typing import Optional

from infrastructure.logging import get_module_logger
from integrations.openai import OpenAIClient
from modules.minerals.drafts import DraftStore
from modules.minerals.errors import UpstreamServiceError, ValidationError
from modules.minerals.forms import MineralForm
from modules.minerals.images import (
    content_type_for_extension,
    detect_image_extension,
    to_data_url,
)

logger = get_module_logger()


@dataclass(frozen=True)
class SuggestionResult:
    draft_id: str
    form: MineralForm
    preview_data_url: str


DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024


class SuggestionService:
    def __init__(
        self,
        client: OpenAIClient,
        drafts: DraftStore,
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
    ):
        self.client = client
        self.drafts = drafts
        self.max_image_bytes = max_image_bytes

    def suggest(
        self,
        image_bytes: bytes,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        context: str = "",
    ) -> SuggestionResult:
        """Ask for a suggested profile and store the image as a draft.

        No draft is created unless the suggestion succeeds.

        Raises:
            ValidationError: If the image is missing, too large or not a
                supported format.
            UpstreamServiceError: If the suggestion service fails.
        """
        if not image_bytes:
            raise ValidationError("image upload is required", field="image")
        if len(image_bytes) > self.max_image_bytes:
            raise ValidationError(
                f"image exceeds {self.max_image_bytes} bytes", field="image"
            )
        image_ext = detect_image_extension(filename, content_type)

        result = self.client.suggest_mineral(
            image_bytes, content_type_for_extension(image_ext), (context or "").strip()
        )
        if not result.is_success:
            logger.warning(
                "mineral_suggestion_failed",
                error_code=result.error_code,
                error=result.message,
            )
            raise UpstreamServiceError(result.message, error_code=result.error_code)

        draft_id = self.drafts.put(image_bytes, image_ext)
        return SuggestionResult(
            draft_id=draft_id,
            form=MineralForm.from_suggestion(result.data),
            preview_data_url=to_data_url(image_bytes, image_ext),
        )
