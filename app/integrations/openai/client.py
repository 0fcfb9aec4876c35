"""Chat-completions client for mineral suggestions and metadata translation.

Every call returns an ``OperationResult``. Transport errors, timeouts and
non-2xx responses are classified with ``classify_http_error``; responses that
do not match the requested schema are permanent errors.

Usage:
    client = OpenAIClient(api_key="sk-...", model="gpt-4o-mini")
    result = client.translate_metadata(fields, Language.FR)
    if result.is_success:
        translated = result.data
"""

import base64
import json
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from infrastructure.i18n import Language
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus, classify_http_error
from integrations.openai.schemas import (
    SUGGESTION_SCHEMA,
    TRANSLATION_SCHEMA,
    MineralSuggestion,
    MineralTranslation,
)

logger = get_module_logger()

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"

SUGGESTION_SYSTEM_PROMPT = (
    "You assist mineral cataloging. Use the provided photo (and optional operator "
    "context) to infer likely mineral properties. Generate a plausible common_name "
    "and a concise description. If uncertain, provide conservative estimates and "
    "practical values. Output must follow JSON schema exactly."
)
TRANSLATION_SYSTEM_PROMPT = (
    "You are a translation engine for mineral catalog metadata. "
    "Output JSON only and follow schema exactly."
)

SUGGESTION_TEMPERATURE = 0.2
TRANSLATION_TEMPERATURE = 0.1


class OpenAIClient:
    """Thin wrapper over the chat-completions endpoint with strict JSON output.

    Args:
        api_key: API key; when empty the client reports itself unconfigured
            and every call fails with UNAUTHORIZED without touching the network.
        model: Model name.
        api_url: Chat-completions endpoint.
        timeout_seconds: Per-request timeout.
        session: Optional requests session (tests inject a mock).
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 20.0,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key or None
        self.model = model
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return self._api_key is not None

    def suggest_mineral(
        self, image_bytes: bytes, content_type: str, context: str = ""
    ) -> OperationResult:
        """Ask the model for a mineral profile from a photo.

        Returns:
            OperationResult with a ``MineralSuggestion`` as data on success.
        """
        data_url = (
            f"data:{content_type};base64,{base64.b64encode(image_bytes).decode('ascii')}"
        )
        user_prompt = (
            f"User context (may be empty): {context}\n\n"
            "Generate a likely mineral profile from the image. "
            "The common_name and description must be generated too."
        )
        messages = [
            {
                "role": "system",
                "content": [{"type": "text", "text": SUGGESTION_SYSTEM_PROMPT}],
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": user_prompt},
                    {"type": "image_url", "image_url": {"url": data_url}},
                ],
            },
        ]
        result = self._structured_completion(
            messages, "mineral_suggestion", SUGGESTION_SCHEMA, SUGGESTION_TEMPERATURE
        )
        if not result.is_success:
            return result
        try:
            suggestion = MineralSuggestion.model_validate(result.data)
        except ValidationError as e:
            logger.warning("openai_suggestion_schema_mismatch", error=str(e))
            return OperationResult.permanent_error(
                f"invalid AI JSON payload: {e}", error_code="SCHEMA_MISMATCH"
            )
        return OperationResult.success(data=suggestion)

    def translate_metadata(
        self, fields: Dict[str, str], language: Language
    ) -> OperationResult:
        """Translate mineral text fields from English into ``language``.

        Returns:
            OperationResult with a dict of translated fields on success.
        """
        user_prompt = (
            f"Translate the mineral metadata JSON from English into "
            f"{language.english_name} ({language.value}). Use concise professional "
            "wording. Preserve chemical formulas and symbols exactly.\n\n"
            f"Source JSON:\n{json.dumps(fields, ensure_ascii=False)}"
        )
        messages = [
            {
                "role": "system",
                "content": [{"type": "text", "text": TRANSLATION_SYSTEM_PROMPT}],
            },
            {"role": "user", "content": [{"type": "text", "text": user_prompt}]},
        ]
        result = self._structured_completion(
            messages,
            f"mineral_translation_{language.value}",
            TRANSLATION_SCHEMA,
            TRANSLATION_TEMPERATURE,
        )
        if not result.is_success:
            return result
        try:
            translation = MineralTranslation.model_validate(result.data)
        except ValidationError as e:
            return OperationResult.permanent_error(
                f"invalid translation payload: {e}", error_code="SCHEMA_MISMATCH"
            )
        return OperationResult.success(data=translation.model_dump())

    def _structured_completion(
        self,
        messages: List[Dict[str, Any]],
        schema_name: str,
        schema: Dict[str, Any],
        temperature: float,
    ) -> OperationResult:
        if not self.is_configured:
            return OperationResult.error(
                OperationStatus.UNAUTHORIZED,
                "OPENAI_API_KEY is not configured",
                error_code="NOT_CONFIGURED",
            )

        payload = {
            "model": self.model,
            "messages": messages,
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": schema_name, "strict": True, "schema": schema},
            },
            "temperature": temperature,
        }
        log = logger.bind(schema=schema_name, model=self.model)
        try:
            response = self._session.post(
                self.api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            result = classify_http_error(e)
            log.warning(
                "openai_request_failed",
                error_code=result.error_code,
                error=result.message,
            )
            return result

        try:
            body = response.json()
        except ValueError as e:
            log.warning("openai_response_not_json", error=str(e))
            return OperationResult.permanent_error(
                f"failed to parse OpenAI response: {e}", error_code="INVALID_RESPONSE"
            )

        choices = body.get("choices") if isinstance(body, dict) else None
        if not choices or not isinstance(choices, list):
            log.warning("openai_response_without_choices")
            return OperationResult.permanent_error(
                "OpenAI response had no choices", error_code="INVALID_RESPONSE"
            )
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            log.warning("openai_response_without_content")
            return OperationResult.permanent_error(
                "OpenAI response had no message content", error_code="INVALID_RESPONSE"
            )
        try:
            data = json.loads(content)
        except ValueError as e:
            log.warning("openai_content_not_json", error=str(e))
            return OperationResult.permanent_error(
                f"invalid AI JSON payload: {e}", error_code="SCHEMA_MISMATCH"
            )
        log.debug("openai_request_succeeded")
        return OperationResult.success(data=data)
