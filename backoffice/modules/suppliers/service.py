from typing import Any

from pydantic import BaseModel

from backoffice.core.service import ResourceService, to_payload, unwrap


class SupplierService(ResourceService):
    path = "/suppliers"

    async def add_purchase(self, supplier_id: str, data: BaseModel | dict) -> Any:
        resp = await self.dispatcher.post(self._url(supplier_id, "purchases"), json=to_payload(data))
        return unwrap(resp)

    async def purchases(self, supplier_id: str) -> list:
        resp = await self.dispatcher.get(self._url(supplier_id, "purchases"))
        return unwrap(resp) or []
