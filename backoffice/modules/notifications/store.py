import logging
from typing import Any, Callable


logger = logging.getLogger(__name__)

OrderListener = Callable[[dict[str, Any]], None]


class NotificationStore:
    """Состояние уведомлений на клиенте: список (новые сверху), счётчик
    непрочитанных и признак подключения к real-time каналу."""

    NOTIFICATION_EVENTS = ("notification", "admin-notification")
    ORDER_EVENTS = ("order-update",)

    def __init__(self):
        self.notifications: list[dict[str, Any]] = []
        self.unread_count = 0
        self.is_connected = False
        self._order_listeners: list[OrderListener] = []

    def add(self, notification: dict[str, Any]) -> None:
        self.notifications.insert(0, notification)
        self.unread_count += 1

    def mark_read(self, notification_id: str) -> None:
        self.notifications = [
            {**n, "isRead": True} if n.get("_id") == notification_id else n for n in self.notifications
        ]
        self.unread_count = max(0, self.unread_count - 1)

    def mark_all_read(self) -> None:
        self.notifications = [{**n, "isRead": True} for n in self.notifications]
        self.unread_count = 0

    def remove(self, notification_id: str) -> None:
        removed = next((n for n in self.notifications if n.get("_id") == notification_id), None)
        self.notifications = [n for n in self.notifications if n.get("_id") != notification_id]
        if removed is not None and not removed.get("isRead"):
            self.unread_count = max(0, self.unread_count - 1)

    def set_notifications(self, notifications: list[dict[str, Any]]) -> None:
        self.notifications = list(notifications)

    def set_unread_count(self, count: int) -> None:
        self.unread_count = count

    def set_connected(self, connected: bool) -> None:
        self.is_connected = connected

    def on_order_update(self, listener: OrderListener) -> Callable[[], None]:
        self._order_listeners.append(listener)
        return lambda: self._order_listeners.remove(listener)

    def handle_event(self, name: str, payload: dict[str, Any]) -> bool:
        """Разбор события real-time канала. Возвращает False для неизвестных событий."""
        if name in self.NOTIFICATION_EVENTS:
            logger.info("New notification: %s", payload.get("title"))
            self.add(payload)
            return True
        if name in self.ORDER_EVENTS:
            for listener in list(self._order_listeners):
                try:
                    listener(payload)
                except Exception:
                    logger.exception("Order update listener failed")
            return True
        logger.debug("Ignoring real-time event %s", name)
        return False
