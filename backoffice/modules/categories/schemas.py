from typing import Literal

from pydantic import Field

from backoffice.core.schemas import PaginationParams, QueryModel


CategoryStatus = Literal["active", "inactive"]


class CategoryQuery(QueryModel):
    flat: bool | None = None
    status: CategoryStatus | None = None


class CategoryUpdate(QueryModel):
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    parent_id: str | None = None
    image: str | None = None
    icon: str | None = None
    status: CategoryStatus | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    seo_keywords: list[str] | None = None


class CategoryCreate(CategoryUpdate):
    name: str = Field(..., min_length=1)


class CategoryProductsQuery(PaginationParams):
    pass
