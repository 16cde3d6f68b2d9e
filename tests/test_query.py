import asyncio

import pytest

from backoffice.core.query import QueryClient, freeze_key
from backoffice.modules.products.schemas import ProductQuery
from tests.helpers import wait_until


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def counter(result=None):
    calls = []

    async def fetch():
        calls.append(1)
        return result if result is not None else len(calls)

    return fetch, calls


async def test_fresh_data_is_served_from_cache():
    clock = Clock()
    queries = QueryClient(stale_time=60, clock=clock)
    fetch, calls = counter()

    assert await queries.fetch(("products",), fetch) == 1
    clock.now += 30
    assert await queries.fetch(("products",), fetch) == 1
    assert len(calls) == 1

    clock.now += 31
    assert await queries.fetch(("products",), fetch) == 2


async def test_force_and_zero_stale_time_refetch():
    queries = QueryClient(stale_time=60)
    fetch, calls = counter()

    await queries.fetch(("products", "barcode", "123"), fetch, stale_time=0)
    await queries.fetch(("products", "barcode", "123"), fetch, stale_time=0)
    await queries.fetch(("products", "barcode", "123"), fetch, force=True)

    assert len(calls) == 3


async def test_concurrent_fetches_share_one_request():
    queries = QueryClient()
    gate = asyncio.Event()
    calls = []

    async def fetch():
        calls.append(1)
        await gate.wait()
        return ["p1"]

    first = asyncio.ensure_future(queries.fetch(("products",), fetch))
    second = asyncio.ensure_future(queries.fetch(("products",), fetch))
    await wait_until(lambda: calls)
    assert queries.state("products").is_loading
    gate.set()

    assert await first == await second == ["p1"]
    assert len(calls) == 1
    assert queries.state("products").status == "success"


async def test_error_state_keeps_previous_data():
    queries = QueryClient()
    queries.set_data(("orders",), ["old"])

    async def broken():
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        await queries.fetch(("orders",), broken, force=True)

    state = queries.state("orders")
    assert state.status == "error"
    assert state.data == ["old"]
    assert isinstance(state.error, RuntimeError)


async def test_invalidate_by_prefix():
    queries = QueryClient()
    queries.set_data(("products", None), "list")
    queries.set_data(("products", "p1"), "detail")
    queries.set_data(("categories", "c1"), "category")

    assert queries.invalidate("products") == 2
    assert queries.state("products", "p1").status == "idle"
    assert queries.get_data("categories", "c1") == "category"


async def test_mutate_invalidates_only_on_success():
    queries = QueryClient()
    queries.set_data(("products", None), "list")

    async def failing():
        raise RuntimeError("409")

    with pytest.raises(RuntimeError):
        await queries.mutate(failing, invalidates=[("products",)])
    assert queries.get_data("products", None) == "list"

    async def created():
        return {"_id": "p2"}

    assert await queries.mutate(created, invalidates=[("products",)]) == {"_id": "p2"}
    assert queries.get_data("products", None) is None


def test_keys_with_params_are_stable():
    a = freeze_key(("products", {"search": "tea", "page": 1, "limit": None}))
    b = freeze_key(("products", {"page": 1, "search": "tea"}))
    c = freeze_key(("products", ProductQuery(page=1, search="tea")))
    assert a == b == c


async def test_invalidated_inflight_fetch_does_not_refill_cache():
    queries = QueryClient(stale_time=60)
    gate = asyncio.Event()

    async def old():
        await gate.wait()
        return "old"

    async def new():
        return "new"

    pending = asyncio.ensure_future(queries.fetch(("products",), old))
    await wait_until(lambda: queries.state("products").is_loading)

    queries.invalidate("products")
    gate.set()
    assert await pending == "old"

    assert queries.state("products").status == "idle"
    assert await queries.fetch(("products",), new) == "new"


async def test_fetch_after_invalidate_starts_new_request():
    queries = QueryClient(stale_time=60)
    gate = asyncio.Event()
    calls = []

    async def slow():
        calls.append("slow")
        await gate.wait()
        return "old"

    async def fast():
        calls.append("fast")
        return "new"

    pending = asyncio.ensure_future(queries.fetch(("orders", "stats"), slow))
    await wait_until(lambda: calls)

    queries.invalidate("orders")
    assert await queries.fetch(("orders", "stats"), fast) == "new"

    gate.set()
    await pending
    assert calls == ["slow", "fast"]
    assert queries.get_data("orders", "stats") == "new"
