import logging
from typing import Callable

import flet as ft

from backoffice.core.events import SessionEvents
from backoffice.core.schemas import SessionExpired


logger = logging.getLogger(__name__)

LOGIN_ROUTE = "/login"


def bind_session_expiry(page: ft.Page, events: SessionEvents, login_route: str = LOGIN_ROUTE) -> Callable[[], None]:
    """Показываем уведомление и уводим на экран входа, когда диспетчер завершил сессию.

    Текущий маршрут запоминается в page.session, чтобы вернуть пользователя после входа.
    """

    def on_expired(event: SessionExpired) -> None:
        logger.info("Session expired, redirecting to %s", login_route)
        if page.route not in (login_route, "/"):
            page.session.set("redirect_after_login", page.route)
        page.open(ft.SnackBar(ft.Text(event.message), duration=5000))
        page.go(login_route)

    return events.subscribe(on_expired)


def pop_redirect_after_login(page: ft.Page, default: str = "/") -> str:
    route = page.session.get("redirect_after_login")
    if route:
        page.session.remove("redirect_after_login")
    return route or default
