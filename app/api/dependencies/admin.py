"""Admin session dependency."""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status

from api.dependencies.language import RequestLanguageDep
from infrastructure.logging import get_module_logger
from infrastructure.services import SessionStoreDep, TranslatorDep
from modules.minerals.sessions import SESSION_COOKIE_NAME

logger = get_module_logger()


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(SESSION_COOKIE_NAME) or None


def require_admin(
    request: Request,
    sessions: SessionStoreDep,
    translator: TranslatorDep,
    language: RequestLanguageDep,
) -> str:
    """Return the caller's session token or reject the request with 401."""
    token = get_session_token(request)
    if not sessions.is_valid(token):
        logger.info("admin_session_rejected", path=request.url.path)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=translator.translate("admin.session_required", language),
        )
    return token


AdminSessionDep = Annotated[str, Depends(require_admin)]
