from typing import Any

from backoffice.core.service import ResourceService, to_payload, unwrap
from backoffice.modules.orders.schemas import OrderStatus, OrderStatusUpdate


class OrderService(ResourceService):
    path = "/orders"

    async def update_status(self, order_id: str, status: OrderStatus | str, notes: str | None = None) -> Any:
        data = OrderStatusUpdate(status=status, notes=notes)
        resp = await self.dispatcher.patch(self._url(order_id, "status"), json=to_payload(data))
        return unwrap(resp)

    async def stats(self) -> Any:
        resp = await self.dispatcher.get(self._url("stats"))
        return unwrap(resp)
