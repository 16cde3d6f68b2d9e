from typing import Literal

from backoffice.core.schemas import PaginationParams


class UploadQuery(PaginationParams):
    type: str | None = None
    search: str | None = None
    sort_by: str | None = None
    order: Literal["asc", "desc"] | None = None
