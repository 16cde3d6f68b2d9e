from typing import Any

from backoffice.core.service import ResourceService, unwrap


class UserService(ResourceService):
    path = "/users"

    async def toggle_status(self, user_id: str) -> Any:
        resp = await self.dispatcher.patch(self._url(user_id, "toggle-status"))
        return unwrap(resp)

    async def stats(self) -> Any:
        resp = await self.dispatcher.get(self._url("stats"))
        return unwrap(resp)
