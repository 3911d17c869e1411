import random
from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from inventory_visibility.app import create_app
from inventory_visibility.config import Settings, get_settings
from inventory_visibility.mutations import InventoryService
from inventory_visibility.seed import DEFAULT_PRODUCTS, DEFAULT_WAREHOUSES
from inventory_visibility.store import CatalogStore
from inventory_visibility.trends import SyntheticTrendSource

TODAY = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    for name in ("INVENTORY_VIS_SEED_FILE", "INVENTORY_VIS_TREND_SEED", "INVENTORY_VIS_MAX_PAGE_SIZE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("INVENTORY_VIS_LOG_LEVEL", "warning")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(name="store")
def store_fixture() -> CatalogStore:
    return CatalogStore(DEFAULT_WAREHOUSES, DEFAULT_PRODUCTS)


@pytest.fixture(name="service")
def service_fixture(store: CatalogStore) -> InventoryService:
    return InventoryService(store)


@pytest.fixture(name="trend_source")
def trend_source_fixture() -> SyntheticTrendSource:
    return SyntheticTrendSource(rng=random.Random(42), today=lambda: TODAY)


@pytest.fixture(name="client")
def client_fixture(store: CatalogStore, trend_source: SyntheticTrendSource) -> Generator[TestClient, None, None]:
    settings = Settings(log_level="warning", max_page_size=3, cors_origins=[])
    app = create_app(settings=settings, store=store, trend_source=trend_source)

    with TestClient(app) as client:
        yield client
