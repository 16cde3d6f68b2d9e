from typing import Literal

from pydantic import Field

from backoffice.core.schemas import PaginationParams, QueryModel


class SupplierQuery(PaginationParams):
    search: str | None = None
    status: Literal["active", "inactive"] | None = None


class Address(QueryModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None


class SupplierIn(QueryModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None
    company: str | None = None
    tax_id: str | None = None
    website: str | None = None
    contact_person: str | None = None
    notes: str | None = None
    status: Literal["active", "inactive"] | None = None


class PurchaseIn(QueryModel):
    product_id: str
    product_name: str
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    total_amount: float | None = Field(None, ge=0)
    date: str | None = None
    invoice_number: str | None = None
