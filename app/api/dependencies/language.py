"""Request language dependency."""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.i18n import Language
from infrastructure.services import LanguageResolverDep

LANGUAGE_COOKIE = "lang"


def get_request_language(request: Request, resolver: LanguageResolverDep) -> Language:
    """Resolve the language for this request: cookie, Accept-Language, default."""
    return resolver.resolve(
        cookie_value=request.cookies.get(LANGUAGE_COOKIE),
        accept_language=request.headers.get("accept-language"),
    )


RequestLanguageDep = Annotated[Language, Depends(get_request_language)]
