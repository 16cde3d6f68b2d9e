from enum import Enum

from pydantic import BaseModel, Field

from backoffice.core.schemas import PaginationParams, QueryModel


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REJECTED = "rejected"
    RETURNED = "returned"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    ONLINE = "online"
    BANK_TRANSFER = "bank_transfer"


class OrderQuery(PaginationParams):
    status: OrderStatus | None = None
    payment_status: str | None = None
    customer_id: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class OrderItemIn(QueryModel):
    product_id: str
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)


class CustomerInfo(BaseModel):
    name: str
    email: str | None = None
    phone: str | None = None


class ShippingAddress(QueryModel):
    phone: str
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None


class OrderCreate(QueryModel):
    items: list[OrderItemIn] = Field(..., min_length=1)
    payment_method: PaymentMethod
    customer_id: str | None = None
    shipping_address: ShippingAddress | None = None
    customer_info: CustomerInfo | None = None
    notes: str | None = None


class OrderStatusUpdate(QueryModel):
    status: OrderStatus
    notes: str | None = None
