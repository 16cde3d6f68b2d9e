import logging
from typing import Callable

from backoffice.core.config import settings
from backoffice.core.schemas import SessionExpired


logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionExpired], None]


class SessionEvents:
    """Широковещательный сигнал «сессия истекла». Fire-and-forget:
    ошибка слушателя не мешает остальным и не доходит до диспетчера."""

    def __init__(self):
        self._listeners: list[SessionListener] = []

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit_session_expired(self, message: str | None = None) -> SessionExpired:
        event = SessionExpired(message=message or settings.SESSION_EXPIRED_MESSAGE)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Session-expired listener %r failed", listener)
        return event
