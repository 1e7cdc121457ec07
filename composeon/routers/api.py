from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..catalog import (
    Catalog,
    IconNotFound,
    IconReadError,
    category_stats,
    get_icon,
    popular_icons,
    search_icons,
    trending_icons,
)
from ..config import get_settings
from ..icons import Variation
from ..manifest import build_manifest, manifest_to_dict
from ..posts import generate_post
from ..schemas import (
    CatalogEntry,
    CategoryStats,
    HealthRead,
    IconDetail,
    PaginatedIcons,
    PostCreate,
    PostRead,
    RescanRead,
)
from ..store import CatalogStore, get_catalog, get_store
from ..svg_utils import is_svg, read_svg_metadata

router = APIRouter(prefix="/api", tags=["icons"])

CatalogDep = Annotated[Catalog, Depends(get_catalog)]
StoreDep = Annotated[CatalogStore, Depends(get_store)]


def _not_found(exc: IconNotFound) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get("/health", response_model=HealthRead)
def api_health(*, catalog: CatalogDep) -> HealthRead:
    return HealthRead(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        total=len(catalog),
        source=catalog.source,
    )


@router.get("/icons", response_model=PaginatedIcons)
def api_list_icons(
    search: str | None = Query(None, description="Search across name, display name, category and tags"),
    category: str | None = Query("all", description="Filter by category, or 'all'"),
    page: int = Query(0, ge=0, description="Zero-based page number"),
    limit: int | None = Query(None, ge=1, le=500, description="Icons per page"),
    *,
    catalog: CatalogDep,
) -> PaginatedIcons:
    page_size = limit or get_settings().page_size
    icons, total = search_icons(
        catalog,
        query=search,
        category=category,
        limit=page_size,
        offset=page * page_size,
    )
    return PaginatedIcons(
        total=total,
        page=page,
        limit=page_size,
        has_more=(page + 1) * page_size < total,
        icons=icons,
        categories=category_stats(catalog),
    )


@router.get("/icons/popular", response_model=list[CatalogEntry])
def api_popular_icons(
    limit: int = Query(20, ge=1, le=100),
    *,
    catalog: CatalogDep,
    store: StoreDep,
) -> list[CatalogEntry]:
    return popular_icons(catalog, limit=limit, popular=store.indexer.config.popular)


@router.get("/icons/trending", response_model=list[CatalogEntry])
def api_trending_icons(
    limit: int = Query(10, ge=1, le=100),
    *,
    catalog: CatalogDep,
    store: StoreDep,
) -> list[CatalogEntry]:
    return trending_icons(catalog, limit=limit, trending=store.indexer.config.trending)


@router.get("/icons/{name}", response_model=IconDetail)
def api_get_icon(
    name: str,
    *,
    catalog: CatalogDep,
    store: StoreDep,
) -> IconDetail:
    """Return one catalog entry with the SVG metadata of its default file."""
    try:
        entry = get_icon(catalog, name)
    except IconNotFound as exc:
        raise _not_found(exc) from exc

    try:
        svg = read_svg_metadata(store.read_icon(entry))
    except (IconReadError, ValueError):
        # Fallback entries have no file on disk.
        svg = None
    return IconDetail(**entry.model_dump(), svg=svg)


@router.get("/icons/{name}/svg")
def api_get_icon_svg(
    name: str,
    variation: Variation = Query(Variation.DEFAULT, description="Icon variation"),
    *,
    catalog: CatalogDep,
    store: StoreDep,
) -> Response:
    try:
        entry = get_icon(catalog, name)
    except IconNotFound as exc:
        raise _not_found(exc) from exc

    try:
        content = store.read_icon(entry, variation)
    except IconReadError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc
    if not is_svg(content):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Icon '{name}' is not a valid SVG document",
        )
    return Response(content=content, media_type="image/svg+xml")


@router.get("/categories", response_model=CategoryStats)
def api_categories(*, catalog: CatalogDep, store: StoreDep) -> CategoryStats:
    return CategoryStats(
        total=len(catalog),
        categories=category_stats(catalog),
        available_categories=list(store.indexer.config.categories),
    )


@router.get("/manifest")
def api_manifest(*, catalog: CatalogDep) -> dict:
    return manifest_to_dict(build_manifest(catalog))


@router.post("/posts", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def api_create_post(
    payload: PostCreate,
    *,
    catalog: CatalogDep,
) -> PostRead:
    return generate_post(catalog, payload.icons, template=payload.template)


@router.post("/rescan", response_model=RescanRead)
def api_rescan(*, store: StoreDep) -> RescanRead:
    catalog = store.rebuild()
    return RescanRead(total=len(catalog), source=catalog.source, categories=category_stats(catalog))
