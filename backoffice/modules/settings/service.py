from typing import Any

from pydantic import BaseModel

from backoffice.core.service import ResourceService, to_payload, unwrap
from backoffice.modules.settings.schemas import MaintenanceToggle


class SettingsService(ResourceService):
    """Настройки магазина: один объект, без идентификатора."""

    path = "/settings"

    async def get(self) -> Any:
        resp = await self.dispatcher.get(self.path)
        return unwrap(resp)

    async def update(self, data: BaseModel | dict) -> Any:
        resp = await self.dispatcher.put(self.path, json=to_payload(data))
        return unwrap(resp)

    async def update_company(self, data: BaseModel | dict) -> Any:
        resp = await self.dispatcher.patch(self._url("company"), json=to_payload(data))
        return unwrap(resp)

    async def update_social(self, data: BaseModel | dict) -> Any:
        resp = await self.dispatcher.patch(self._url("social"), json=to_payload(data))
        return unwrap(resp)

    async def toggle_maintenance(self, enabled: bool, message: str | None = None) -> Any:
        data = MaintenanceToggle(enabled=enabled, message=message)
        resp = await self.dispatcher.patch(self._url("maintenance"), json=to_payload(data))
        return unwrap(resp)
