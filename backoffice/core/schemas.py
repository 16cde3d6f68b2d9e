from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiCall(BaseModel):
    """Один логический HTTP-вызов. Неизменяемый: заголовок и отметка повтора
    выставляются через копии, исходный объект вызывающего не трогается."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: str
    path: str
    params: dict[str, Any] | None = None
    json_body: Any = Field(default=None, alias="json")
    files: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    retried: bool = False

    def has_authorization(self) -> bool:
        return any(name.lower() == "authorization" for name in self.headers)

    def with_bearer(self, token: str) -> "ApiCall":
        headers = {k: v for k, v in self.headers.items() if k.lower() != "authorization"}
        headers["Authorization"] = f"Bearer {token}"
        return self.model_copy(update={"headers": headers})

    def as_retry(self) -> "ApiCall":
        return self.model_copy(update={"retried": True})


class PaginationMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    page: int
    limit: int
    total: int
    total_pages: int


class ApiResponse(BaseModel):
    """Конверт ответа бэкенда."""

    success: bool = True
    message: str | None = None
    data: Any = None
    meta: PaginationMeta | None = None


class RefreshResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    access_token: str = Field(min_length=1)
    refresh_token: str | None = None

    @classmethod
    def from_body(cls, body: Any) -> "RefreshResult":
        # бэкенд оборачивает токены в {"success": ..., "data": {...}}
        if isinstance(body, dict) and isinstance(body.get("data"), dict):
            body = body["data"]
        return cls.model_validate(body)


class SessionExpired(BaseModel):
    message: str


class QueryModel(BaseModel):
    """База для параметров запросов и тел: camelCase на проводе, None не отправляем."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, use_enum_values=True)

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class PaginationParams(QueryModel):
    page: int | None = Field(None, ge=1)
    limit: int | None = Field(None, ge=1)
