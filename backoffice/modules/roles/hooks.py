from typing import Any

from backoffice.core.hooks import ResourceQueries
from backoffice.modules.roles.service import RoleService


class RoleQueries(ResourceQueries):
    key = "roles"
    service: RoleService

    async def list(self, status: str | None = None, *, force: bool = False) -> list:
        return await self.queries.fetch(
            (self.key, {"status": status}), lambda: self.service.list(status), stale_time=self.stale_time, force=force
        )

    async def users(self, role_id: str) -> list:
        return await self.queries.fetch(
            (self.key, role_id, "users"), lambda: self.service.users(role_id), stale_time=self.stale_time
        )

    async def assign(self, user_id: str, role_id: str) -> Any:
        # роль меняет пользователя, поэтому сбрасываем и users
        return await self.queries.mutate(
            lambda: self.service.assign(user_id, role_id), invalidates=[("users",), (self.key,)]
        )
