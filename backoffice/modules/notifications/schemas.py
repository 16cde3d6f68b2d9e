from typing import Any, Literal

from pydantic import Field

from backoffice.core.schemas import PaginationParams, QueryModel


NotificationType = Literal["order", "reject", "comment", "system", "stock", "other"]


class NotificationQuery(PaginationParams):
    is_read: bool | None = None
    type: NotificationType | None = None


class NotificationCreate(QueryModel):
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    recipient_id: str | None = None
    type: NotificationType | None = None
    priority: Literal["low", "medium", "high"] | None = None
    data: dict[str, Any] | None = None
    action_url: str | None = None
