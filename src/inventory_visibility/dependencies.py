"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Query, Request

from .config import Settings
from .mutations import InventoryService
from .store import CatalogStore
from .trends import TrendSource


def get_store(request: Request) -> CatalogStore:
    """Return the catalog store owned by the running application."""

    return request.app.state.store


def get_service(request: Request) -> InventoryService:
    return request.app.state.service


def get_trend_source(request: Request) -> TrendSource:
    return request.app.state.trend_source


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def pagination_params(
    request: Request,
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> tuple[int | None, int]:
    settings = get_app_settings(request)
    if limit is not None and limit > settings.max_page_size:
        limit = settings.max_page_size
    return limit, offset
