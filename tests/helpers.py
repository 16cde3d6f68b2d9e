import asyncio
import inspect
from typing import Any, Callable

import httpx

from backoffice.core.schemas import ApiCall


def respond(status: int = 200, body: Any = None) -> httpx.Response:
    request = httpx.Request("GET", "http://test")
    if body is None:
        return httpx.Response(status, request=request)
    return httpx.Response(status, json=body, request=request)


def ok(data: Any = None, **extra) -> httpx.Response:
    return respond(200, {"success": True, "data": data, **extra})


def bearer(call: ApiCall) -> str | None:
    value = call.headers.get("Authorization")
    return value.removeprefix("Bearer ") if value else None


async def wait_until(predicate: Callable[[], bool], turns: int = 200) -> None:
    for _ in range(turns):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition not reached")


class FakeTransport:
    """Записывает каждый вызов и отдаёт ответ обработчика (обычного или async)."""

    def __init__(self, handler: Callable[[ApiCall], Any]):
        self.handler = handler
        self.calls: list[ApiCall] = []
        self.timeouts: list[float] = []

    async def send(self, call: ApiCall, *, timeout: float) -> httpx.Response:
        self.calls.append(call)
        self.timeouts.append(timeout)
        result = self.handler(call)
        if inspect.isawaitable(result):
            result = await result
        return result

    def paths(self) -> list[str]:
        return [c.path for c in self.calls]


class FakeBackend:
    """Бэкенд с набором валидных access-токенов и управляемым /auth/refresh."""

    def __init__(
        self,
        valid_tokens=("A1",),
        refresh_data: dict | None = None,
        refresh_status: int = 200,
        accept_refreshed: bool = True,
    ):
        self.valid = set(valid_tokens)
        self.refresh_data = refresh_data if refresh_data is not None else {"accessToken": "A2"}
        self.refresh_status = refresh_status
        self.accept_refreshed = accept_refreshed
        self.refresh_gate: asyncio.Event | None = None
        self.responses: dict[str, httpx.Response] = {}

    async def __call__(self, call: ApiCall) -> httpx.Response:
        if call.path == "/auth/refresh":
            if self.refresh_gate is not None:
                await self.refresh_gate.wait()
            if self.refresh_status != 200:
                return respond(self.refresh_status, {"success": False, "message": "refresh failed"})
            if self.accept_refreshed:
                self.valid.add(self.refresh_data.get("accessToken"))
            return ok(self.refresh_data)

        if bearer(call) not in self.valid:
            return respond(401, {"success": False, "message": "Unauthorized"})
        if call.path in self.responses:
            return self.responses[call.path]
        return ok({"path": call.path})

    def hold_refresh(self) -> asyncio.Event:
        self.refresh_gate = asyncio.Event()
        return self.refresh_gate
