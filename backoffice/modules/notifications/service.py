from typing import Any

from backoffice.core.service import ResourceService, envelope, unwrap


class NotificationService(ResourceService):
    path = "/notifications"

    async def mark_read(self, notification_id: str) -> Any:
        resp = await self.dispatcher.patch(self._url(notification_id, "read"))
        return unwrap(resp)

    async def mark_all_read(self) -> None:
        resp = await self.dispatcher.patch(self._url("read-all"))
        envelope(resp)

    async def unread_count(self) -> int:
        resp = await self.dispatcher.get(self._url("unread", "count"))
        data = unwrap(resp) or {}
        return int(data.get("count", 0))
