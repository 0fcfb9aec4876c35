"""Public catalog endpoints."""

from pathlib import PurePath
from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import FileResponse

from api.dependencies.language import RequestLanguageDep
from api.dependencies.rate_limits import PUBLIC_LIMIT, get_limiter
from infrastructure.services import CatalogCacheDep, MineralStoreDep, TranslatorDep
from modules.minerals.errors import NotFoundError
from modules.minerals.images import content_type_for_extension, normalize_extension
from modules.minerals.models import PUBLIC_DATA_PREFIX, is_valid_folder_name
from modules.minerals.report import ReportRequest, build_report

router = APIRouter(tags=["Minerals"])
limiter = get_limiter()


@router.get("/minerals")
@limiter.limit(PUBLIC_LIMIT)
def list_minerals(
    request: Request,  # pylint: disable=unused-argument
    language: RequestLanguageDep,
    catalog_cache: CatalogCacheDep,
    translator: TranslatorDep,
):
    """All minerals in display order, in the request language."""
    catalog = catalog_cache.get_catalog(language)
    return {
        "language": language.value,
        "direction": language.direction,
        "title": translator.translate("catalog.title", language),
        "empty_message": translator.translate("catalog.empty", language),
        "count": len(catalog),
        "minerals": catalog.ordered,
    }


@router.get("/minerals/{slug}")
@limiter.limit(PUBLIC_LIMIT)
def get_mineral(
    request: Request,  # pylint: disable=unused-argument
    slug: str,
    language: RequestLanguageDep,
    catalog_cache: CatalogCacheDep,
):
    """One mineral with its report for the default audience."""
    mineral = catalog_cache.get_mineral(language, slug)
    return {
        "language": language.value,
        "direction": language.direction,
        "mineral": mineral,
        "report": build_report(mineral, ReportRequest()),
    }


@router.post("/api/minerals/{slug}/report")
@limiter.limit(PUBLIC_LIMIT)
def create_report(
    request: Request,  # pylint: disable=unused-argument
    slug: str,
    language: RequestLanguageDep,
    catalog_cache: CatalogCacheDep,
    report_request: Optional[ReportRequest] = Body(default=None),
):
    """Report for a custom audience, purpose and site context."""
    mineral = catalog_cache.get_mineral(language, slug)
    return build_report(mineral, report_request or ReportRequest())


@router.get(PUBLIC_DATA_PREFIX + "/{folder_name}/{filename}")
@limiter.limit(PUBLIC_LIMIT)
def get_mineral_file(
    request: Request,  # pylint: disable=unused-argument
    folder_name: str,
    filename: str,
    store: MineralStoreDep,
):
    """Serve a mineral image from the record store."""
    ext = normalize_extension(PurePath(filename).suffix)
    if (
        not is_valid_folder_name(folder_name)
        or ext is None
        or PurePath(filename).name != filename
        or filename.startswith(".")
    ):
        raise NotFoundError("file not found")
    path = store.folder_path(folder_name) / filename
    if not path.is_file():
        raise NotFoundError("file not found")
    return FileResponse(path, media_type=content_type_for_extension(ext))
