import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable

from pydantic import BaseModel

from backoffice.core.config import settings


logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Any]]


@dataclass
class QueryState:
    status: str = "idle"  # idle | loading | success | error
    data: Any = None
    error: BaseException | None = None
    updated_at: float | None = None

    @property
    def is_loading(self) -> bool:
        return self.status == "loading"


class QueryClient:
    """Кэш запросов для экранов: свежесть по stale_time, склейка
    одновременных запросов одного ключа, инвалидация по префиксу ключа."""

    def __init__(self, stale_time: float | None = None, clock: Callable[[], float] = time.monotonic):
        self.stale_time = settings.QUERY_STALE_TIME if stale_time is None else stale_time
        self._clock = clock
        self._states: dict[tuple, QueryState] = {}
        self._inflight: dict[tuple, asyncio.Task] = {}

    def state(self, *key) -> QueryState:
        state = self._states.get(freeze_key(key))
        return QueryState(**vars(state)) if state else QueryState()

    def get_data(self, *key) -> Any:
        state = self._states.get(freeze_key(key))
        return state.data if state else None

    def set_data(self, key: Iterable, data: Any) -> None:
        self._states[freeze_key(tuple(key))] = QueryState("success", data, None, self._clock())

    async def fetch(self, key: Iterable, fn: Fetcher, *, stale_time: float | None = None, force: bool = False) -> Any:
        key = freeze_key(tuple(key))
        stale_time = self.stale_time if stale_time is None else stale_time

        state = self._states.get(key)
        if not force and state and state.status == "success" and self._clock() - state.updated_at < stale_time:
            return state.data

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._run(key, fn))
            self._inflight[key] = task
        # shield: отмена одного из ждущих не отменяет общий запрос
        return await asyncio.shield(task)

    async def mutate(self, fn: Fetcher, invalidates: Iterable[Iterable] = ()) -> Any:
        result = await fn()
        for key in invalidates:
            self.invalidate(*key)
        return result

    def invalidate(self, *prefix) -> int:
        prefix = freeze_key(prefix)
        stale = [key for key in self._states if key[: len(prefix)] == prefix]
        for key in stale:
            del self._states[key]
        # идущий запрос вернёт данные до мутации: в кэш он их уже не запишет
        for key in [key for key in self._inflight if key[: len(prefix)] == prefix]:
            del self._inflight[key]
        if stale:
            logger.debug("Invalidated %d queries for %r", len(stale), prefix)
        return len(stale)

    def clear(self) -> None:
        self._states.clear()
        self._inflight.clear()

    async def _run(self, key: tuple, fn: Fetcher) -> Any:
        previous = self._states.get(key)
        if self._is_current(key):
            self._states[key] = QueryState("loading", previous.data if previous else None)
        try:
            data = await fn()
        except Exception as e:
            if self._is_current(key):
                self._states[key] = QueryState("error", previous.data if previous else None, e, self._clock())
            raise
        else:
            if self._is_current(key):
                self._states[key] = QueryState("success", data, None, self._clock())
            return data
        finally:
            if self._is_current(key):
                del self._inflight[key]

    def _is_current(self, key: tuple) -> bool:
        return self._inflight.get(key) is asyncio.current_task()


def freeze_key(parts: tuple) -> tuple:
    return tuple(_freeze(part) for part in parts)


def _freeze(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return _freeze(value.model_dump(by_alias=True, exclude_none=True, mode="json"))
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items() if v is not None))
    if isinstance(value, (list, tuple, set)):
        return tuple(_freeze(v) for v in value)
    return value
