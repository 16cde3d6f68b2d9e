from typing import Literal

from backoffice.core.schemas import PaginationParams, QueryModel


UserRole = Literal["superadmin", "admin", "manager", "staff", "customer"]


class UserQuery(PaginationParams):
    search: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None


class UserUpdate(QueryModel):
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None
    phone: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None
