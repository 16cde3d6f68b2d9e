from typing import Any

from backoffice.core.service import ResourceService, to_payload, unwrap
from backoffice.modules.products.schemas import StockUpdate


class ProductService(ResourceService):
    path = "/products"

    async def get_by_barcode(self, barcode: str) -> Any:
        resp = await self.dispatcher.get(self._url("barcode", barcode))
        return unwrap(resp)

    async def update_stock(self, product_id: str, stock_quantity: int, damaged_quantity: int | None = None) -> Any:
        data = StockUpdate(stock_quantity=stock_quantity, damaged_quantity=damaged_quantity)
        resp = await self.dispatcher.patch(self._url(product_id, "stock"), json=to_payload(data))
        return unwrap(resp)

    async def low_stock(self) -> list:
        resp = await self.dispatcher.get(self._url("stock", "low"))
        return unwrap(resp) or []
