from typing import Any

from backoffice.core.service import ResourceService, to_payload, unwrap
from backoffice.modules.roles.schemas import RoleAssignment


class RoleService(ResourceService):
    path = "/roles"

    async def list(self, status: str | None = None) -> list:
        resp = await self.dispatcher.get(self.path, params=to_payload({"status": status}))
        return unwrap(resp) or []

    async def assign(self, user_id: str, role_id: str) -> Any:
        data = RoleAssignment(user_id=user_id, role_id=role_id)
        resp = await self.dispatcher.post(self._url("assign"), json=to_payload(data))
        return unwrap(resp)

    async def users(self, role_id: str) -> list:
        resp = await self.dispatcher.get(self._url(role_id, "users"))
        return unwrap(resp) or []
