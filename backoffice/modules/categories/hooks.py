from typing import Any

from backoffice.core.hooks import ResourceQueries
from backoffice.core.schemas import ApiResponse
from backoffice.modules.categories.service import CategoryService


class CategoryQueries(ResourceQueries):
    key = "categories"
    service: CategoryService

    async def by_slug(self, slug: str) -> Any:
        return await self.queries.fetch(
            (self.key, "slug", slug), lambda: self.service.get_by_slug(slug), stale_time=self.stale_time
        )

    async def products(self, category_id: str, page: int | None = None, limit: int | None = None) -> ApiResponse:
        return await self.queries.fetch(
            (self.key, category_id, "products", {"page": page, "limit": limit}),
            lambda: self.service.products(category_id, page, limit),
            stale_time=self.stale_time,
        )
