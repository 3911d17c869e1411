"""Pydantic schemas for API payloads and seed files."""

from __future__ import annotations

import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt, StrictInt


class WarehouseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str = Field(..., min_length=1)
    name: str
    city: str
    country: str


class ProductRead(BaseModel):
    """Product as exposed to callers; ``warehouse`` carries the warehouse code."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., min_length=1)
    name: str
    sku: str
    warehouse: str = Field(..., validation_alias=AliasChoices("warehouse", "warehouse_code"))
    stock: NonNegativeInt
    demand: NonNegativeInt


class TrendPointRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    stock: NonNegativeInt
    demand: NonNegativeInt


class InventorySummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_stock: int
    total_demand: int
    fill_rate: float = Field(..., description="Percentage of demand covered by stock")
    status_counts: dict[str, int]


class DemandUpdate(BaseModel):
    # Strict so that "12" is rejected here instead of silently parsed.
    demand: StrictInt


class StockTransfer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Left unconstrained: an empty code is judged by the transfer checks.
    from_code: str = Field(..., alias="from")
    to_code: str = Field(..., alias="to")
    qty: StrictInt


class ErrorDetail(BaseModel):
    kind: str
    message: str


class SeedFile(BaseModel):
    """Layout of a JSON file used to seed the catalog at startup."""

    warehouses: list[WarehouseRead] = Field(..., min_length=1)
    products: list[ProductRead] = Field(default_factory=list)
