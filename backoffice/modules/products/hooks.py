from typing import Any

from backoffice.core.hooks import ResourceQueries
from backoffice.modules.products.service import ProductService


class ProductQueries(ResourceQueries):
    key = "products"
    service: ProductService

    async def by_barcode(self, barcode: str) -> Any:
        # штрихкоды не кэшируем
        return await self.queries.fetch(
            (self.key, "barcode", barcode), lambda: self.service.get_by_barcode(barcode), stale_time=0
        )

    async def low_stock(self) -> list:
        return await self.queries.fetch(
            (self.key, "low-stock"), self.service.low_stock, stale_time=2 * 60
        )

    async def adjust_stock(self, product_id: str, stock_quantity: int, damaged_quantity: int | None = None) -> Any:
        return await self.queries.mutate(
            lambda: self.service.update_stock(product_id, stock_quantity, damaged_quantity),
            invalidates=[(self.key, product_id), (self.key,), (self.key, "low-stock")],
        )
