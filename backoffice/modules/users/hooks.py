from typing import Any

from backoffice.core.hooks import ResourceQueries
from backoffice.modules.users.service import UserService


class UserQueries(ResourceQueries):
    key = "users"
    service: UserService

    async def stats(self) -> Any:
        return await self.queries.fetch((self.key, "stats"), self.service.stats, stale_time=self.stale_time)

    async def toggle_status(self, user_id: str) -> Any:
        return await self.queries.mutate(
            lambda: self.service.toggle_status(user_id), invalidates=[(self.key,)]
        )
