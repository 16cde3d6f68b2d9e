import asyncio
from collections import deque
from typing import Callable


class RefreshCoordinator:
    """Состояние обновления токена: флаг refreshing и FIFO-очередь ожидающих.

    Ожидающий это asyncio.Future, который получает новый access-токен
    или исключение. Порядок пробуждения совпадает с порядком подписки.
    """

    def __init__(self):
        self.refreshing = False
        self._waiters: deque[asyncio.Future] = deque()

    @property
    def pending(self) -> int:
        return len(self._waiters)

    def begin(self) -> None:
        if self.refreshing:
            raise RuntimeError("refresh already in flight")
        self.refreshing = True

    async def wait(self) -> str:
        fut = asyncio.get_running_loop().create_future()
        self._waiters.append(fut)
        return await fut

    def resolve(self, access_token: str) -> None:
        waiters = self._reset()
        for fut in waiters:
            if not fut.done():
                fut.set_result(access_token)

    def reject(self, make_error: Callable[[], BaseException]) -> None:
        waiters = self._reset()
        for fut in waiters:
            if not fut.done():
                fut.set_exception(make_error())

    def _reset(self) -> list[asyncio.Future]:
        waiters = list(self._waiters)
        self._waiters.clear()
        self.refreshing = False
        return waiters
