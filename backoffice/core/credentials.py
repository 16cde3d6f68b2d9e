import json
import logging
from typing import Any, Protocol

import flet as ft


logger = logging.getLogger(__name__)

ACCESS_TOKEN = "access_token"
REFRESH_TOKEN = "refresh_token"
USER = "user"

KEYS = (ACCESS_TOKEN, REFRESH_TOKEN, USER)


class CredentialStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def clear(self) -> None: ...


class MemoryCredentialStore:
    def __init__(self, **initial: str):
        self._values: dict[str, str] = {k: v for k, v in initial.items() if v}

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def clear(self) -> None:
        self._values.clear()


class ClientStorageCredentialStore(MemoryCredentialStore):
    """Хранилище поверх page.client_storage (flet).

    Память первична: если запись в client_storage упала, значение всё равно
    используется до конца жизни процесса, ошибка только пишется в лог.
    """

    def __init__(self, page: ft.Page, prefix: str = "backoffice."):
        super().__init__()
        self.page = page
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def load(self) -> None:
        for key in KEYS:
            try:
                value = await self.page.client_storage.get_async(self._key(key))
            except Exception:
                logger.exception("client_storage: load %s failed", key)
                continue
            if value:
                self._values[key] = value

    def set(self, key: str, value: str) -> None:
        super().set(key, value)
        try:
            self.page.client_storage.set(self._key(key), value)
        except Exception:
            logger.exception("client_storage: save %s failed", key)

    def clear(self) -> None:
        super().clear()
        for key in KEYS:
            try:
                self.page.client_storage.remove(self._key(key))
            except Exception:
                logger.exception("client_storage: remove %s failed", key)


def set_tokens(store: CredentialStore, access_token: str, refresh_token: str | None = None) -> None:
    store.set(ACCESS_TOKEN, access_token)
    if refresh_token:
        store.set(REFRESH_TOKEN, refresh_token)


def is_authenticated(store: CredentialStore) -> bool:
    return bool(store.get(ACCESS_TOKEN) or store.get(REFRESH_TOKEN))


def get_cached_user(store: CredentialStore) -> dict[str, Any] | None:
    raw = store.get(USER)
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Cached user is not valid JSON, ignoring")
        return None


def set_cached_user(store: CredentialStore, user: dict[str, Any]) -> None:
    store.set(USER, json.dumps(user))
