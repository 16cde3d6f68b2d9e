import logging
from datetime import datetime, timezone
from typing import Any

import jwt
from pydantic import BaseModel

from backoffice.core.credentials import (
    REFRESH_TOKEN,
    get_cached_user,
    is_authenticated,
    set_cached_user,
    set_tokens,
)
from backoffice.core.exceptions import ApiClientError
from backoffice.core.service import ResourceService, envelope, to_payload, unwrap
from backoffice.modules.auth.schemas import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginRequest,
    PasswordChange,
    RegisterRequest,
    ResetPasswordRequest,
)


logger = logging.getLogger(__name__)

# 401 на этих путях означает неверные данные пользователя, а не истёкшая сессия
PUBLIC_PATHS = ("/auth/login", "/auth/register", "/auth/forgot-password", "/auth/reset-password")


class AuthService(ResourceService):
    path = "/auth"

    @property
    def store(self):
        return self.dispatcher.store

    async def login(self, email: str, password: str) -> AuthResponse:
        data = LoginRequest(email=email, password=password)
        resp = await self.dispatcher.post(self._url("login"), json=to_payload(data))
        return self._start_session(unwrap(resp))

    async def register(self, data: RegisterRequest | dict) -> AuthResponse:
        if isinstance(data, dict):
            data = RegisterRequest.model_validate(data)
        resp = await self.dispatcher.post(self._url("register"), json=to_payload(data))
        return self._start_session(unwrap(resp))

    async def logout(self) -> None:
        """Локальный выход выполняется всегда, даже если бэкенд не ответил."""
        try:
            resp = await self.dispatcher.post(self._url("logout"))
            envelope(resp)
        except ApiClientError as e:
            logger.warning("Logout request failed: %s", e)
        finally:
            self.store.clear()

    async def me(self) -> dict[str, Any]:
        resp = await self.dispatcher.get(self._url("me"))
        user = unwrap(resp)
        if user:
            set_cached_user(self.store, user)
        return user

    async def refresh_token(self, refresh_token: str | None = None) -> AuthResponse:
        refresh_token = refresh_token or self.store.get(REFRESH_TOKEN)
        resp = await self.dispatcher.post(self._url("refresh"), json={"refreshToken": refresh_token})
        auth = AuthResponse.model_validate(unwrap(resp))
        set_tokens(self.store, auth.access_token, auth.refresh_token)
        if not auth.refresh_token:
            auth = auth.model_copy(update={"refresh_token": refresh_token})
        return auth

    async def change_password(self, current_password: str, new_password: str) -> None:
        data = PasswordChange(current_password=current_password, new_password=new_password)
        resp = await self.dispatcher.post("/users/change-password", json=to_payload(data))
        envelope(resp)

    async def update_profile(self, data: BaseModel | dict) -> dict[str, Any]:
        resp = await self.dispatcher.put("/users/profile", json=to_payload(data))
        user = unwrap(resp)
        if user:
            set_cached_user(self.store, user)
        return user

    async def forgot_password(self, email: str) -> dict[str, Any]:
        data = ForgotPasswordRequest(email=email)
        resp = await self.dispatcher.post(self._url("forgot-password"), json=to_payload(data))
        return unwrap(resp)

    async def reset_password(self, token: str, new_password: str) -> dict[str, Any]:
        data = ResetPasswordRequest(token=token, new_password=new_password)
        resp = await self.dispatcher.post(self._url("reset-password"), json=to_payload(data))
        return unwrap(resp)

    def is_authenticated(self) -> bool:
        return is_authenticated(self.store)

    def current_user(self) -> dict[str, Any] | None:
        return get_cached_user(self.store)

    def _start_session(self, data: Any) -> AuthResponse:
        auth = AuthResponse.model_validate(data)
        set_tokens(self.store, auth.access_token, auth.refresh_token)
        user = auth.user or user_from_token(auth.access_token)
        if user:
            set_cached_user(self.store, user)
        return auth


def user_from_token(token: str) -> dict[str, Any] | None:
    """Профиль из payload JWT. Подпись не проверяется: это кэш для UI,
    доверенную проверку делает бэкенд."""
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.warning("Failed to decode token: %s", e)
        return None

    issued = payload.get("iat")
    created_at = datetime.fromtimestamp(issued, timezone.utc) if issued else datetime.now(timezone.utc)
    return {
        "_id": payload.get("userId") or payload.get("id") or payload.get("_id"),
        "name": payload.get("name", ""),
        "email": payload.get("email", ""),
        "role": payload.get("role", "customer"),
        "permissions": payload.get("permissions", []),
        "isActive": True,
        "createdAt": created_at.isoformat(),
    }
