"""
Конфигурация приложения с использованием Pydantic Settings
"""
import logging
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from image_proxy.utils.constants import DEFAULT_REFERER, UPSTREAM_TIMEOUT_SECONDS

# Загружаем переменные окружения из .env файла (если есть)
load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Настройки приложения из переменных окружения"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Server
    port: int = 3000
    host: str = "0.0.0.0"
    log_level: str = "INFO"

    # Дополнительные домены через запятую, например "cdn.esempio.com,img.example.org"
    allowed_hosts: str = ""

    # Upstream
    upstream_referer: str = DEFAULT_REFERER
    upstream_timeout: float = UPSTREAM_TIMEOUT_SECONDS

    @property
    def extra_hosts(self) -> List[str]:
        return parse_host_list(self.allowed_hosts)


def parse_host_list(raw: str) -> List[str]:
    """Разбирает список доменов через запятую: trim, lowercase, без пустых значений"""
    if not raw:
        return []
    return [part.strip().lower() for part in raw.split(",") if part.strip()]


# Создаём экземпляр настроек
settings = Settings()
