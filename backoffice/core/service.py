from typing import Any

import httpx
from pydantic import BaseModel

from backoffice.core.dispatcher import Dispatcher
from backoffice.core.exceptions import ApiError
from backoffice.core.schemas import ApiResponse


class ResourceService:
    """Базовый сервис ресурса REST: list/get/create/update/delete поверх Dispatcher."""

    path: str = ""

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    def _url(self, *parts: Any) -> str:
        return "/".join([self.path, *(str(p) for p in parts)])

    async def list(self, query: BaseModel | dict | None = None) -> ApiResponse:
        resp = await self.dispatcher.get(self.path, params=to_payload(query))
        return envelope(resp)

    async def get(self, item_id: str) -> Any:
        resp = await self.dispatcher.get(self._url(item_id))
        return unwrap(resp)

    async def create(self, data: BaseModel | dict) -> Any:
        resp = await self.dispatcher.post(self.path, json=to_payload(data))
        return unwrap(resp)

    async def update(self, item_id: str, data: BaseModel | dict) -> Any:
        resp = await self.dispatcher.put(self._url(item_id), json=to_payload(data))
        return unwrap(resp)

    async def delete(self, item_id: str) -> None:
        resp = await self.dispatcher.delete(self._url(item_id))
        envelope(resp)


def to_payload(data: BaseModel | dict | None) -> dict | None:
    if data is None:
        return None
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, exclude_none=True, mode="json")
    return {k: v for k, v in data.items() if v is not None}


def envelope(resp: httpx.Response) -> ApiResponse:
    if not resp.is_success:
        raise api_error(resp)
    if not resp.content:
        return ApiResponse()
    body = resp.json()
    if not isinstance(body, dict) or not ({"success", "data"} & body.keys()):
        return ApiResponse(data=body)
    return ApiResponse.model_validate(body)


def unwrap(resp: httpx.Response) -> Any:
    return envelope(resp).data


def api_error(resp: httpx.Response) -> ApiError:
    try:
        payload = resp.json()
    except ValueError:
        payload = resp.text or None
    detail = None
    if isinstance(payload, dict):
        detail = payload.get("message") or payload.get("detail")
    return ApiError(resp.status_code, detail or resp.reason_phrase, payload)
