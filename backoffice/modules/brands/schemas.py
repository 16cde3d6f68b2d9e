from typing import Literal

from pydantic import Field

from backoffice.core.schemas import PaginationParams, QueryModel


BrandStatus = Literal["active", "inactive"]


class BrandQuery(PaginationParams):
    search: str | None = None
    status: BrandStatus | None = None
    sort_by: str | None = None
    order: Literal["asc", "desc"] | None = None


class BrandUpdate(QueryModel):
    name: str | None = None
    description: str | None = None
    logo: str | None = None
    website: str | None = None
    status: BrandStatus | None = None


class BrandCreate(BrandUpdate):
    name: str = Field(..., min_length=1)
