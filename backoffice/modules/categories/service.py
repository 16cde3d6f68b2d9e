from typing import Any

from backoffice.core.config import settings
from backoffice.core.schemas import ApiResponse
from backoffice.core.service import ResourceService, envelope, to_payload, unwrap
from backoffice.modules.categories.schemas import CategoryProductsQuery


class CategoryService(ResourceService):
    path = "/categories"

    async def get_by_slug(self, slug: str) -> Any:
        resp = await self.dispatcher.get(self._url("slug", slug))
        return unwrap(resp)

    async def products(self, category_id: str, page: int | None = None, limit: int | None = None) -> ApiResponse:
        query = CategoryProductsQuery(page=page or 1, limit=limit or settings.ITEMS_PER_PAGE)
        resp = await self.dispatcher.get(self._url(category_id, "products"), params=to_payload(query))
        return envelope(resp)
