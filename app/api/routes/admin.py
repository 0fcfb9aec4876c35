"""Admin endpoints: session, suggest, publish and maintenance."""

from typing import Annotated, Optional

from fastapi import APIRouter, File, Form, Request, UploadFile, status
from fastapi.responses import JSONResponse

from api.dependencies.admin import AdminSessionDep, get_session_token
from api.dependencies.language import RequestLanguageDep
from api.dependencies.rate_limits import ADMIN_LIMIT, ADMIN_LOGIN_LIMIT, get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    DraftStoreDep,
    MineralStoreDep,
    PublishPipelineDep,
    SessionStoreDep,
    SettingsDep,
    SuggestionServiceDep,
    TranslatorDep,
)
from modules.minerals.errors import UpstreamServiceError
from modules.minerals.forms import PublishForm
from modules.minerals.maintenance import sweep_orphaned_folders
from modules.minerals.sessions import SESSION_COOKIE_NAME

logger = get_module_logger()
router = APIRouter(prefix="/admin", tags=["Admin"])
limiter = get_limiter()


@router.get("")
@limiter.limit(ADMIN_LIMIT)
def admin_status(
    request: Request,
    sessions: SessionStoreDep,
    translator: TranslatorDep,
    language: RequestLanguageDep,
):
    """Whether the caller holds a live admin session."""
    return {
        "title": translator.translate("admin.title", language),
        "has_admin_session": sessions.is_valid(get_session_token(request)),
    }


@router.post("/login")
@limiter.limit(ADMIN_LOGIN_LIMIT)
def login(
    request: Request,  # pylint: disable=unused-argument
    sessions: SessionStoreDep,
    settings: SettingsDep,
    translator: TranslatorDep,
    language: RequestLanguageDep,
    password: Annotated[str, Form()] = "",
):
    token = sessions.login(password)
    if token is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": translator.translate("admin.login_invalid", language)},
        )
    response = JSONResponse(
        content={"message": translator.translate("admin.session_created", language)}
    )
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=settings.admin.ADMIN_SESSION_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
@limiter.limit(ADMIN_LIMIT)
def logout(
    request: Request,
    sessions: SessionStoreDep,
    drafts: DraftStoreDep,
    translator: TranslatorDep,
    language: RequestLanguageDep,
):
    """Revoke the session and drop every pending draft."""
    sessions.revoke(get_session_token(request))
    drafts.clear_all()
    response = JSONResponse(
        content={"message": translator.translate("admin.session_closed", language)}
    )
    response.delete_cookie(SESSION_COOKIE_NAME, path="/", httponly=True, samesite="lax")
    return response


@router.post("/minerals/suggest")
@limiter.limit(ADMIN_LIMIT)
def suggest_mineral(
    request: Request,  # pylint: disable=unused-argument
    _session: AdminSessionDep,
    suggestions: SuggestionServiceDep,
    translator: TranslatorDep,
    language: RequestLanguageDep,
    image: Annotated[UploadFile, File()],
    suggestion_context: Annotated[str, Form()] = "",
):
    """Store the uploaded photo as a draft and return a pre-filled form."""
    # One byte past the limit is enough to reject an oversized upload
    image_bytes = image.file.read(suggestions.max_image_bytes + 1)
    try:
        result = suggestions.suggest(
            image_bytes,
            filename=image.filename,
            content_type=image.content_type,
            context=suggestion_context,
        )
    except UpstreamServiceError as e:
        raise UpstreamServiceError(
            translator.translate("admin.suggestion_failed", language, error=str(e)),
            error_code=e.error_code,
        ) from e
    return {
        "message": translator.translate("admin.suggestion_ready", language),
        "draft_id": result.draft_id,
        "form": result.form,
        "preview_data_url": result.preview_data_url,
    }


@router.post("/minerals/publish")
@limiter.limit(ADMIN_LIMIT)
def publish_mineral(
    request: Request,  # pylint: disable=unused-argument
    _session: AdminSessionDep,
    pipeline: PublishPipelineDep,
    translator: TranslatorDep,
    language: RequestLanguageDep,
    form: Annotated[PublishForm, Form()],
):
    """Publish a draft using the submitted form values."""
    result = pipeline.publish(form.draft_id.strip(), form)
    outcome = result.outcome
    message = translator.translate(
        "admin.published",
        language,
        identifier=result.identifier,
        translated_count=outcome.translated_count,
    )
    if outcome.fallback_used:
        message += " " + translator.translate(
            "admin.fallback_used",
            language,
            languages=", ".join(outcome.fallback_lang_codes),
        )
    return {
        "message": message,
        "identifier": result.identifier,
        "translated_count": outcome.translated_count,
        "fallback_lang_codes": outcome.fallback_lang_codes,
    }


@router.post("/maintenance/sweep-orphans")
@limiter.limit(ADMIN_LIMIT)
def sweep_orphans(
    request: Request,  # pylint: disable=unused-argument
    _session: AdminSessionDep,
    store: MineralStoreDep,
    settings: SettingsDep,
    translator: TranslatorDep,
    language: RequestLanguageDep,
    grace_seconds: Optional[int] = None,
):
    """Remove folders left behind by publishes that failed part-way."""
    removed = sweep_orphaned_folders(
        store,
        grace_seconds=(
            settings.admin.ORPHAN_GRACE_SECONDS if grace_seconds is None else grace_seconds
        ),
    )
    return {
        "message": translator.translate("admin.orphans_swept", language, count=len(removed)),
        "removed": removed,
    }
