from typing import Any

from backoffice.core.hooks import ResourceQueries
from backoffice.modules.orders.schemas import OrderStatus
from backoffice.modules.orders.service import OrderService


class OrderQueries(ResourceQueries):
    key = "orders"
    service: OrderService

    async def stats(self) -> Any:
        return await self.queries.fetch((self.key, "stats"), self.service.stats, stale_time=self.stale_time)

    async def create(self, data) -> Any:
        return await self.queries.mutate(
            lambda: self.service.create(data), invalidates=[(self.key,), (self.key, "stats")]
        )

    async def update_status(self, order_id: str, status: OrderStatus | str, notes: str | None = None) -> Any:
        return await self.queries.mutate(
            lambda: self.service.update_status(order_id, status, notes),
            invalidates=[(self.key,), (self.key, order_id), (self.key, "stats")],
        )

    async def delete(self, order_id: str) -> None:
        await self.queries.mutate(
            lambda: self.service.delete(order_id), invalidates=[(self.key,), (self.key, "stats")]
        )
