from enum import Enum
from typing import Any, Literal

from pydantic import Field

from backoffice.core.schemas import PaginationParams, QueryModel


class ProductStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DRAFT = "draft"
    OUT_OF_STOCK = "out_of_stock"


class ProductQuery(PaginationParams):
    search: str | None = None
    category_id: str | None = None
    status: ProductStatus | None = None
    min_price: float | None = Field(None, ge=0)
    max_price: float | None = Field(None, ge=0)
    sort_by: str | None = None
    order: Literal["asc", "desc"] | None = None


class ProductUpdate(QueryModel):
    name: str | None = None
    description: str | None = None
    price: float | None = Field(None, ge=0)
    cost_price: float | None = Field(None, ge=0)
    category_id: str | None = None
    sku: str | None = None
    barcode: str | None = None
    stock_quantity: int | None = Field(None, ge=0)
    min_stock_level: int | None = Field(None, ge=0)
    unit: str | None = None
    images: list[str] | None = None
    status: ProductStatus | None = None
    tags: list[str] | None = None
    attributes: dict[str, Any] | None = None


class ProductCreate(ProductUpdate):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)


class StockUpdate(QueryModel):
    stock_quantity: int = Field(..., ge=0)
    damaged_quantity: int | None = Field(None, ge=0)
