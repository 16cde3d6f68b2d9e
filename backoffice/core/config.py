from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BACKOFFICE_", env_file=".env", extra="ignore")

    API_BASE_URL: str = "http://localhost:5000/api/v1"
    SOCKET_URL: str | None = None

    REQUEST_TIMEOUT_MS: int = 30_000
    REFRESH_TIMEOUT_MS: int = 10_000
    REFRESH_PATH: str = "/auth/refresh"

    ITEMS_PER_PAGE: int = 20
    QUERY_STALE_TIME: float = 300  # секунд

    SESSION_EXPIRED_MESSAGE: str = "Your session has expired. Please login again."
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def derive_socket_url(self):
        if not self.SOCKET_URL:
            self.SOCKET_URL = self.API_BASE_URL.replace("/api/v1", "")
        return self

    @property
    def request_timeout(self) -> float:
        return self.REQUEST_TIMEOUT_MS / 1000

    @property
    def refresh_timeout(self) -> float:
        return self.REFRESH_TIMEOUT_MS / 1000


settings = Settings()
