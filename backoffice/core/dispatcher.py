import logging
from typing import Any, Iterable

import httpx

from backoffice.core.config import settings
from backoffice.core.coordinator import RefreshCoordinator
from backoffice.core.credentials import ACCESS_TOKEN, REFRESH_TOKEN, CredentialStore, set_tokens
from backoffice.core.events import SessionEvents
from backoffice.core.exceptions import ApiError, AuthenticationRequired, RefreshInterrupted
from backoffice.core.schemas import ApiCall, RefreshResult
from backoffice.core.transport import Transport


logger = logging.getLogger(__name__)


class Dispatcher:
    """Авторизованная отправка запросов с прозрачным обновлением токена.

    - к каждому вызову добавляется Bearer из хранилища (явный заголовок вызывающего важнее);
    - 401 запускает ровно одно обновление токена на всех одновременно упавших;
    - каждый исходный вызов повторяется не более одного раза;
    - любой путь к AuthenticationRequired очищает токены и шлёт сигнал Session-Expired.

    Все прочие ответы (403, 404, 500, ...) возвращаются как есть.
    """

    def __init__(
        self,
        transport: Transport,
        store: CredentialStore,
        events: SessionEvents | None = None,
        coordinator: RefreshCoordinator | None = None,
        *,
        request_timeout: float | None = None,
        refresh_timeout: float | None = None,
        refresh_path: str | None = None,
        public_paths: Iterable[str] = (),
    ):
        self.transport = transport
        self.store = store
        self.events = events or SessionEvents()
        self.coordinator = coordinator or RefreshCoordinator()
        self.request_timeout = request_timeout or settings.request_timeout
        self.refresh_timeout = refresh_timeout or settings.refresh_timeout
        self.refresh_path = _normalize(refresh_path or settings.REFRESH_PATH)
        self.public_paths = frozenset(_normalize(p) for p in public_paths)

    # === Публичный API ===
    async def dispatch(self, call: ApiCall) -> httpx.Response:
        response = await self._send(self._authorize(call))
        if response.status_code != 401:
            return self._passthrough(call, response)

        if self._is_refresh_call(call):
            # иначе получим бесконечный цикл обновлений
            logger.warning("Refresh token is invalid or expired")
            self._end_session()
            raise AuthenticationRequired("Refresh token is invalid or expired")

        if _normalize(call.path) in self.public_paths:
            return response

        if call.retried:
            logger.warning("%s %s rejected after retry", call.method, call.path)
            self._end_session()
            raise AuthenticationRequired("Request rejected after token refresh")

        return await self._recover(call.as_retry())

    async def get(self, path: str, params: dict[str, Any] | None = None, **kwargs) -> httpx.Response:
        return await self.dispatch(ApiCall(method="GET", path=path, params=params, **kwargs))

    async def post(self, path: str, json: Any = None, **kwargs) -> httpx.Response:
        return await self.dispatch(ApiCall(method="POST", path=path, json=json, **kwargs))

    async def put(self, path: str, json: Any = None, **kwargs) -> httpx.Response:
        return await self.dispatch(ApiCall(method="PUT", path=path, json=json, **kwargs))

    async def patch(self, path: str, json: Any = None, **kwargs) -> httpx.Response:
        return await self.dispatch(ApiCall(method="PATCH", path=path, json=json, **kwargs))

    async def delete(self, path: str, **kwargs) -> httpx.Response:
        return await self.dispatch(ApiCall(method="DELETE", path=path, **kwargs))

    async def upload(self, path: str, files: Any, data: Any = None, method: str = "POST") -> httpx.Response:
        return await self.dispatch(ApiCall(method=method, path=path, files=files, json=data))

    # === Обновление токена ===
    async def _recover(self, call: ApiCall) -> httpx.Response:
        if self.coordinator.refreshing:
            # обновление уже идёт: ждём его результата в общей очереди
            access_token = await self.coordinator.wait()
            return await self._resubmit(call, access_token)

        refresh_token = self.store.get(REFRESH_TOKEN)
        if not refresh_token:
            logger.warning("No refresh token found")
            self._end_session()
            raise AuthenticationRequired("No refresh token found")

        self.coordinator.begin()
        try:
            logger.info("Token expired. Refreshing token...")
            result = await self._refresh(refresh_token)
        except Exception as e:
            logger.warning("Token refresh failed: %s", e)
            self.coordinator.reject(lambda: AuthenticationRequired("Token refresh failed"))
            self._end_session()
            raise AuthenticationRequired("Token refresh failed") from e
        except BaseException:
            # отмена задачи посреди обновления: сессия жива, ожидающие не должны висеть вечно
            logger.warning("Token refresh was interrupted")
            self.coordinator.reject(lambda: RefreshInterrupted("Token refresh was interrupted"))
            raise

        logger.info("Token refreshed successfully")
        set_tokens(self.store, result.access_token, result.refresh_token)
        self.coordinator.resolve(result.access_token)
        return await self._resubmit(call, result.access_token)

    async def _refresh(self, refresh_token: str) -> RefreshResult:
        # мимо _authorize и обработки 401, чтобы не уйти в рекурсию
        call = ApiCall(method="POST", path=self.refresh_path, json={"refreshToken": refresh_token})
        response = await self.transport.send(call, timeout=self.refresh_timeout)
        if not response.is_success:
            raise ApiError(response.status_code, "refresh rejected")
        return RefreshResult.from_body(response.json())

    async def _resubmit(self, call: ApiCall, access_token: str) -> httpx.Response:
        response = await self._send(call.with_bearer(access_token))
        if response.status_code == 401:
            logger.warning("%s %s rejected with refreshed token", call.method, call.path)
            self._end_session()
            raise AuthenticationRequired("Request rejected after token refresh")
        return self._passthrough(call, response)

    # === Internal ===
    async def _send(self, call: ApiCall) -> httpx.Response:
        return await self.transport.send(call, timeout=self.request_timeout)

    def _authorize(self, call: ApiCall) -> ApiCall:
        token = self.store.get(ACCESS_TOKEN)
        if token and not call.has_authorization():
            return call.with_bearer(token)
        return call

    def _is_refresh_call(self, call: ApiCall) -> bool:
        return _normalize(call.path) == self.refresh_path

    def _end_session(self) -> None:
        self.store.clear()
        self.events.emit_session_expired()

    def _passthrough(self, call: ApiCall, response: httpx.Response) -> httpx.Response:
        if response.status_code == 403:
            logger.warning("Access forbidden - insufficient permissions: %s %s", call.method, call.path)
        elif response.status_code >= 500:
            logger.warning("Server error %s: %s %s", response.status_code, call.method, call.path)
        return response


def _normalize(path: str) -> str:
    return "/" + path.split("?", 1)[0].strip("/")
