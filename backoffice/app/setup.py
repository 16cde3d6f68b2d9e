import logging

import flet as ft

from backoffice.app.client import BackofficeClient
from backoffice.app.session_expiry import LOGIN_ROUTE, bind_session_expiry
from backoffice.core.credentials import ClientStorageCredentialStore
from backoffice.core.logging import configure_logging


logger = logging.getLogger(__name__)

CLIENT_KEY = "api"


async def run(page: ft.Page) -> BackofficeClient:
    """Старт приложения: логи, токены из client_storage, клиент API в page.session."""
    configure_logging()

    # ---------- токены ----------
    store = ClientStorageCredentialStore(page)
    await store.load()
    # ---------- /токены ----------

    api = BackofficeClient(store=store)
    page.session.set(CLIENT_KEY, api)
    bind_session_expiry(page, api.events)

    page.title = "Back Office"
    page.update()

    if not api.auth.is_authenticated():
        logger.info("No stored session, opening %s", LOGIN_ROUTE)
        page.go(LOGIN_ROUTE)
    return api


def client_for(page: ft.Page) -> BackofficeClient:
    return page.session.get(CLIENT_KEY)


def main() -> None:
    ft.app(target=run)
