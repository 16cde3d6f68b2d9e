from typing import Any

from pydantic import BaseModel

from backoffice.core.query import QueryClient
from backoffice.core.schemas import ApiResponse
from backoffice.core.service import ResourceService


FIVE_MINUTES = 5 * 60


class ResourceQueries:
    """Данные ресурса для экранов: запросы кэшируются в QueryClient,
    мутации сбрасывают кэш по ключу ресурса."""

    key: str = ""
    stale_time: float = FIVE_MINUTES

    def __init__(self, service: ResourceService, queries: QueryClient):
        self.service = service
        self.queries = queries

    async def list(self, query: BaseModel | dict | None = None, *, force: bool = False) -> ApiResponse:
        return await self.queries.fetch(
            (self.key, query), lambda: self.service.list(query), stale_time=self.stale_time, force=force
        )

    async def detail(self, item_id: str, *, force: bool = False) -> Any:
        return await self.queries.fetch(
            (self.key, item_id), lambda: self.service.get(item_id), stale_time=self.stale_time, force=force
        )

    async def create(self, data: BaseModel | dict) -> Any:
        return await self.queries.mutate(lambda: self.service.create(data), invalidates=[(self.key,)])

    async def update(self, item_id: str, data: BaseModel | dict) -> Any:
        return await self.queries.mutate(
            lambda: self.service.update(item_id, data),
            invalidates=[(self.key, item_id), (self.key,)],
        )

    async def delete(self, item_id: str) -> None:
        await self.queries.mutate(lambda: self.service.delete(item_id), invalidates=[(self.key,)])
