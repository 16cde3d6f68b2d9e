import pytest
from pydantic import ValidationError

from backoffice.modules.brands.schemas import BrandQuery, BrandUpdate
from backoffice.modules.categories.schemas import CategoryCreate, CategoryQuery, CategoryUpdate
from backoffice.modules.notifications.schemas import NotificationCreate, NotificationQuery
from backoffice.modules.orders.schemas import (
    CustomerInfo,
    OrderCreate,
    OrderItemIn,
    OrderQuery,
    OrderStatus,
    PaymentMethod,
    ShippingAddress,
)
from backoffice.modules.products.schemas import ProductCreate
from backoffice.modules.roles.schemas import RoleCreate, RoleUpdate
from backoffice.modules.settings.schemas import SettingsUpdate, SocialMedia
from backoffice.modules.suppliers.schemas import Address, PurchaseIn, SupplierIn, SupplierQuery
from backoffice.modules.transactions.schemas import TransactionIn, TransactionQuery
from backoffice.modules.upload.schemas import UploadQuery
from backoffice.modules.users.schemas import UserQuery, UserUpdate


async def test_order_create_wire_format(api, transport):
    order = OrderCreate(
        items=[OrderItemIn(product_id="p1", quantity=2, price=9.5)],
        payment_method=PaymentMethod.CARD,
        shipping_address=ShippingAddress(phone="+100", zip_code="10001"),
        customer_info=CustomerInfo(name="Ann"),
    )

    await api.orders.create(order)

    assert transport.calls[-1].json_body == {
        "items": [{"productId": "p1", "quantity": 2, "price": 9.5}],
        "paymentMethod": "card",
        "shippingAddress": {"phone": "+100", "zipCode": "10001"},
        "customerInfo": {"name": "Ann"},
    }


def test_order_create_needs_items():
    with pytest.raises(ValidationError):
        OrderCreate(items=[], payment_method="cash")


async def test_list_queries_use_camel_case(api, transport):
    await api.orders.list(OrderQuery(status=OrderStatus.PENDING, start_date="2024-01-01"))
    await api.users.list(UserQuery(role="manager", is_active=True))
    await api.transactions.list(TransactionQuery(type="expense", limit=50))
    await api.notifications.list(NotificationQuery(is_read=False))
    await api.suppliers.list(SupplierQuery(search="tea"))
    await api.brands.list(BrandQuery(sort_by="name", order="asc"))
    await api.categories.list(CategoryQuery(flat=True))
    await api.upload.list(UploadQuery(type="image"))

    assert [c.params for c in transport.calls] == [
        {"status": "pending", "startDate": "2024-01-01"},
        {"role": "manager", "isActive": True},
        {"limit": 50, "type": "expense"},
        {"isRead": False},
        {"search": "tea"},
        {"sortBy": "name", "order": "asc"},
        {"flat": True},
        {"type": "image"},
    ]


def test_query_validation():
    with pytest.raises(ValidationError):
        UserQuery(role="root")
    with pytest.raises(ValidationError):
        TransactionQuery(page=0)


async def test_bodies_for_updates(api, transport):
    await api.suppliers.create(SupplierIn(name="Tea Co", address=Address(city="Kyoto"), tax_id="42"))
    await api.suppliers.add_purchase(
        "s1", PurchaseIn(product_id="p1", product_name="Sencha", quantity=3, unit_price=4)
    )
    await api.transactions.create(TransactionIn(type="income", category="sale", amount=120))
    await api.settings.update(SettingsUpdate(tax_rate=7.5, social_media=SocialMedia(instagram="@shop")))
    await api.users.update("u1", UserUpdate(first_name="Ann", is_active=False))
    await api.roles.update("r1", RoleUpdate(is_active=True))
    await api.brands.update("b1", BrandUpdate(status="inactive"))
    await api.categories.update("c1", CategoryUpdate(parent_id="c0", seo_title="Tea"))

    assert [c.json_body for c in transport.calls] == [
        {"name": "Tea Co", "address": {"city": "Kyoto"}, "taxId": "42"},
        {"productId": "p1", "productName": "Sencha", "quantity": 3, "unitPrice": 4.0},
        {"type": "income", "category": "sale", "amount": 120.0},
        {"taxRate": 7.5, "socialMedia": {"instagram": "@shop"}},
        {"firstName": "Ann", "isActive": False},
        {"isActive": True},
        {"status": "inactive"},
        {"parentId": "c0", "seoTitle": "Tea"},
    ]


def test_create_models_require_names():
    with pytest.raises(ValidationError):
        ProductCreate(price=1)
    with pytest.raises(ValidationError):
        CategoryCreate(name="")
    with pytest.raises(ValidationError):
        NotificationCreate(title="Hi", message="")

    assert RoleCreate(name="Editor").to_params() == {"name": "Editor", "permissions": []}


def test_negative_amounts_are_rejected():
    with pytest.raises(ValidationError):
        TransactionIn(amount=0)
    with pytest.raises(ValidationError):
        PurchaseIn(product_id="p1", product_name="x", quantity=0, unit_price=1)
