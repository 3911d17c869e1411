"""FastAPI application factory."""

from __future__ import annotations

import logging
import random
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, status
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, queries, schemas
from .config import Settings, get_settings
from .dependencies import get_service, get_store, get_trend_source, pagination_params
from .errors import InventoryError
from .logger import configure_logging
from .mutations import InventoryService
from .seed import resolve_seed
from .store import CatalogStore
from .trends import SyntheticTrendSource, TrendSource

logger = logging.getLogger(__name__)

_HTTP_STATUS = {
    "NotFound": status.HTTP_404_NOT_FOUND,
    # 422 literal: starlette deprecated the HTTP_422_UNPROCESSABLE_ENTITY name
    "InvalidArgument": 422,
    "InvalidState": status.HTTP_409_CONFLICT,
    "InsufficientStock": status.HTTP_409_CONFLICT,
}


def _http_error(exc: InventoryError) -> HTTPException:
    detail = schemas.ErrorDetail(kind=exc.kind, message=str(exc))
    return HTTPException(
        status_code=_HTTP_STATUS[exc.kind],
        detail=detail.model_dump(),
    )


def build_store(settings: Settings) -> CatalogStore:
    warehouses, products = resolve_seed(settings.seed_file)
    store = CatalogStore(warehouses, products)
    logger.info("Catalog seeded with %d warehouses and %d products", len(warehouses), len(products))
    return store


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[CatalogStore] = None,
    trend_source: Optional[TrendSource] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if store is None:
        store = build_store(settings)
    if trend_source is None:
        trend_source = SyntheticTrendSource(rng=random.Random(settings.trend_seed))

    app = FastAPI(title=settings.app_name, version=__version__)
    app.state.settings = settings
    app.state.store = store
    app.state.service = InventoryService(store)
    app.state.trend_source = trend_source

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health", tags=["system"])
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/warehouses", response_model=list[schemas.WarehouseRead], tags=["catalog"])
    def list_warehouses(catalog: CatalogStore = Depends(get_store)):
        return catalog.get_warehouses()

    @app.get("/products", response_model=list[schemas.ProductRead], tags=["catalog"])
    def list_products(
        search: Optional[str] = None,
        status_filter: Optional[str] = Query(default=None, alias="status"),
        warehouse: Optional[str] = None,
        pagination: tuple[Optional[int], int] = Depends(pagination_params),
        catalog: CatalogStore = Depends(get_store),
    ):
        limit, offset = pagination
        results = queries.query_products(
            catalog.get_products(), search=search, status=status_filter, warehouse=warehouse
        )
        if limit is None:
            return results[offset:]
        return results[offset : offset + limit]

    @app.get("/products/{product_id}", response_model=schemas.ProductRead, tags=["catalog"])
    def get_product(product_id: str, catalog: CatalogStore = Depends(get_store)):
        product = catalog.find_product(product_id)
        if product is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=schemas.ErrorDetail(kind="NotFound", message=f"Product '{product_id}' not found").model_dump(),
            )
        return product

    @app.get("/summary", response_model=schemas.InventorySummaryRead, tags=["analytics"])
    def get_summary(
        search: Optional[str] = None,
        status_filter: Optional[str] = Query(default=None, alias="status"),
        warehouse: Optional[str] = None,
        catalog: CatalogStore = Depends(get_store),
    ):
        selected = queries.query_products(
            catalog.get_products(), search=search, status=status_filter, warehouse=warehouse
        )
        return queries.summarize(selected)

    @app.get("/kpis", response_model=list[schemas.TrendPointRead], tags=["analytics"])
    def list_kpis(
        range_token: str = Query(default="30d", alias="range"),
        source: TrendSource = Depends(get_trend_source),
    ):
        return source.points(range_token)

    @app.patch("/products/{product_id}/demand", response_model=schemas.ProductRead, tags=["inventory"])
    def update_demand(
        product_id: str,
        payload: schemas.DemandUpdate,
        service: InventoryService = Depends(get_service),
    ):
        try:
            return service.update_demand(product_id, payload.demand)
        except InventoryError as exc:
            raise _http_error(exc) from exc

    @app.post("/products/{product_id}/transfer", response_model=schemas.ProductRead, tags=["inventory"])
    def transfer_stock(
        product_id: str,
        payload: schemas.StockTransfer,
        service: InventoryService = Depends(get_service),
    ):
        try:
            return service.transfer_stock(product_id, payload.from_code, payload.to_code, payload.qty)
        except InventoryError as exc:
            raise _http_error(exc) from exc

    return app
