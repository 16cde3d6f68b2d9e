from typing import Any


class ApiClientError(Exception):
    """Базовая ошибка клиента API."""


class TransportError(ApiClientError):
    """Сеть недоступна, DNS, TLS и прочие сбои до получения ответа."""


class RequestTimeout(ApiClientError):
    """Истёк таймаут запроса. Намеренно не наследуется от TransportError."""


class AuthenticationRequired(ApiClientError):
    """Сессия завершена: токены очищены, нужен повторный вход."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message


class ApiError(ApiClientError):
    """Бэкенд вернул не-2xx ответ (403, 404, 409, 422, 500, ...)."""

    def __init__(self, status_code: int, detail: str | None = None, payload: Any = None):
        super().__init__(f"{status_code}: {detail}" if detail else str(status_code))
        self.status_code = status_code
        self.detail = detail
        self.payload = payload


class RefreshInterrupted(ApiClientError):
    """Обновление токена прервано (отмена задачи). Токены не тронуты, сессия продолжается."""
