"""About page and the footer information pages."""

from fastapi import APIRouter, Request

from api.dependencies.language import RequestLanguageDep
from api.dependencies.rate_limits import PUBLIC_LIMIT, get_limiter
from infrastructure.services import TranslatorDep

router = APIRouter(tags=["Pages"])
limiter = get_limiter()

DEFAULT_PAGE = "default"


@router.get("/about")
@limiter.limit(PUBLIC_LIMIT)
def about(request: Request, language: RequestLanguageDep, translator: TranslatorDep):  # pylint: disable=unused-argument
    about_text = translator.get_namespace("about", language)
    return {
        "language": language.value,
        "direction": language.direction,
        "title": about_text.get("title"),
        "subtitle": about_text.get("subtitle"),
        "sections": [
            {
                "title": about_text.get("operating_model"),
                "body": about_text.get("operating_body"),
            }
        ],
        "path_note": about_text.get("path_note"),
    }


@router.get("/pages/{slug}")
@limiter.limit(PUBLIC_LIMIT)
def info_page(
    request: Request,  # pylint: disable=unused-argument
    slug: str,
    language: RequestLanguageDep,
    translator: TranslatorDep,
):
    """Information page for a footer link; unknown slugs get the generic page."""
    pages = translator.get_namespace("pages", language)
    page = pages.get(slug) or pages.get(DEFAULT_PAGE, {})
    return {
        "language": language.value,
        "direction": language.direction,
        "slug": slug,
        "title": page.get("title"),
        "body": page.get("body"),
    }
