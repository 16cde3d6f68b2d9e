from pydantic import Field

from backoffice.core.schemas import QueryModel


class RoleUpdate(QueryModel):
    name: str | None = None
    description: str | None = None
    permissions: list[str] | None = None
    is_active: bool | None = None


class RoleCreate(RoleUpdate):
    name: str = Field(..., min_length=1)
    permissions: list[str] = Field(default_factory=list)


class RoleAssignment(QueryModel):
    user_id: str
    role_id: str
