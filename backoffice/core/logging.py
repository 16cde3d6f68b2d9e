import logging

from backoffice.core.config import settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Настройка корневого логгера для приложения (библиотека сама ничего не настраивает)."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    # httpx пишет каждый запрос на INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
