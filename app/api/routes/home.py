"""Landing page data and language selection."""

from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import RedirectResponse

from api.dependencies.language import LANGUAGE_COOKIE, RequestLanguageDep
from api.dependencies.rate_limits import PUBLIC_LIMIT, get_limiter
from infrastructure.i18n import Language, language_options
from infrastructure.logging import get_module_logger
from infrastructure.services import LanguageResolverDep, TranslatorDep

logger = get_module_logger()
router = APIRouter(tags=["Home"])
limiter = get_limiter()

LANGUAGE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


@router.get("/")
@limiter.limit(PUBLIC_LIMIT)
def home(request: Request, language: RequestLanguageDep, translator: TranslatorDep):  # pylint: disable=unused-argument
    """Localized landing text plus the language picker options."""
    home_text = translator.get_namespace("home", language)
    return {
        "language": language.value,
        "direction": language.direction,
        "title": home_text.get("title"),
        "subtitle": home_text.get("subtitle"),
        "languages": language_options(),
    }


@router.post("/language")
@limiter.limit(PUBLIC_LIMIT)
def set_language(
    request: Request,  # pylint: disable=unused-argument
    resolver: LanguageResolverDep,
    lang: Annotated[str, Form()] = "",
):
    """Remember the visitor's language in a cookie and go back home."""
    language = Language.parse(lang) or resolver.default_language
    logger.info("language_selected", requested=lang, language=language.value)
    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        LANGUAGE_COOKIE,
        language.value,
        max_age=LANGUAGE_COOKIE_MAX_AGE,
        path="/",
        samesite="lax",
    )
    return response
