from typing import Protocol

import httpx

from backoffice.core.exceptions import RequestTimeout, TransportError
from backoffice.core.schemas import ApiCall


class Transport(Protocol):
    async def send(self, call: ApiCall, *, timeout: float) -> httpx.Response: ...


class HttpxTransport:
    """Один HTTP-запрос без повторов и без знания об авторизации."""

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/")
        self._client = client

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def send(self, call: ApiCall, *, timeout: float) -> httpx.Response:
        kwargs = dict(
            params=call.params,
            headers=call.headers,
            timeout=timeout,
        )
        if call.files is not None:
            kwargs["files"] = call.files
            if call.json_body is not None:
                kwargs["data"] = call.json_body
        elif call.json_body is not None:
            kwargs["json"] = call.json_body

        try:
            if self._client is not None:
                return await self._client.request(call.method, self.url_for(call.path), **kwargs)
            async with httpx.AsyncClient() as client:
                return await client.request(call.method, self.url_for(call.path), **kwargs)
        except httpx.TimeoutException as e:
            raise RequestTimeout(f"{call.method} {call.path} timed out after {timeout}s") from e
        except httpx.RequestError as e:
            # сеть, редиректы, битое тело ответа
            raise TransportError(f"{call.method} {call.path}: {e}") from e

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
