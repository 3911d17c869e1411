"""Command line interface for the inventory visibility service."""

from __future__ import annotations

import random
from typing import Optional

import typer
import uvicorn

from . import queries
from .app import build_store
from .config import Settings, get_settings
from .logger import configure_logging
from .seed import SeedFileError
from .status import StockStatus
from .store import CatalogStore
from .trends import SyntheticTrendSource, window_days

app = typer.Typer(help="Run and inspect the inventory visibility service.")

_STATUS_COLOURS = {
    StockStatus.HEALTHY: typer.colors.GREEN,
    StockStatus.LOW: typer.colors.YELLOW,
    StockStatus.CRITICAL: typer.colors.RED,
}


def _print_header(title: str) -> None:
    typer.secho(title, bold=True, fg=typer.colors.CYAN)


def _resolve_settings() -> Settings:
    settings = get_settings()
    configure_logging(settings.log_level)
    return settings


def _load_store(settings: Settings) -> CatalogStore:
    try:
        return build_store(settings)
    except (SeedFileError, ValueError) as exc:
        typer.secho(f"Cannot load catalog: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1) from exc


@app.command()
def run(
    host: Optional[str] = typer.Option(None, help="Hostname to bind"),
    port: Optional[int] = typer.Option(None, help="Port to expose"),
    reload: Optional[bool] = typer.Option(None, help="Enable auto-reload"),
    log_level: Optional[str] = typer.Option(None, help="Uvicorn log level"),
) -> None:
    """Start the FastAPI service using Uvicorn."""

    settings = _resolve_settings()

    uvicorn.run(
        "inventory_visibility.app:create_app",
        host=host or settings.host,
        port=port or settings.port,
        reload=settings.reload if reload is None else reload,
        log_level=log_level or settings.log_level,
        factory=True,
    )


@app.command("warehouses")
def list_warehouses_cmd() -> None:
    """Display the warehouses in the catalog."""

    store = _load_store(_resolve_settings())
    _print_header("Warehouses")
    for warehouse in store.get_warehouses():
        typer.echo(f"- {warehouse.code} {warehouse.name} | {warehouse.city}, {warehouse.country}")


@app.command("products")
def list_products_cmd(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Match name, SKU or id"),
    status: Optional[str] = typer.Option(None, "--status", help="Healthy, Low or Critical"),
    warehouse: Optional[str] = typer.Option(None, "--warehouse", "-w", help="Warehouse code"),
) -> None:
    """Display products matching the given filters."""

    store = _load_store(_resolve_settings())
    products = queries.query_products(store.get_products(), search=search, status=status, warehouse=warehouse)
    if not products:
        typer.echo("No products found.")
        return
    _print_header(f"{len(products)} product(s)")
    for product in products:
        typer.echo(
            f"- {product.id} {product.name} [{product.sku}] @ {product.warehouse_code} "
            f"| stock={product.stock} demand={product.demand} ",
            nl=False,
        )
        typer.secho(product.status.value, fg=_STATUS_COLOURS[product.status])


@app.command()
def summary() -> None:
    """Print catalog totals and the fill rate."""

    store = _load_store(_resolve_settings())
    totals = queries.summarize(store.get_products())
    _print_header("Inventory summary")
    typer.echo(f"Total stock: {totals.total_stock}")
    typer.echo(f"Total demand: {totals.total_demand}")
    typer.echo(f"Fill rate: {totals.fill_rate:.1f}%")
    for name, count in totals.status_counts.items():
        typer.echo(f"{name}: {count}")


@app.command()
def trend(
    range_token: str = typer.Option("30d", "--range", "-r", help="7d, 14d or 30d"),
) -> None:
    """Print a daily stock and demand series."""

    settings = _resolve_settings()
    source = SyntheticTrendSource(rng=random.Random(settings.trend_seed))
    _print_header(f"Trend over {window_days(range_token)} days")
    for point in source.points(range_token):
        typer.echo(f"{point.date.isoformat()}  stock={point.stock}  demand={point.demand}")


@app.command()
def show_config() -> None:
    """Print the effective settings."""

    settings = _resolve_settings()
    typer.echo(f"App name: {settings.app_name}")
    typer.echo(f"Bind: {settings.host}:{settings.port}")
    typer.echo(f"Log level: {settings.log_level}")
    typer.echo(f"Seed file: {settings.seed_file or 'built-in'}")
    typer.echo(f"Trend seed: {settings.trend_seed if settings.trend_seed is not None else 'random'}")
    typer.echo(f"Max page size: {settings.max_page_size}")


def main() -> None:
    """Entry-point for console scripts."""

    app()


if __name__ == "__main__":  # pragma: no cover
    main()
