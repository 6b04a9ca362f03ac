"""
Загрузка изображения с upstream CDN с ретраями
"""
import logging
import time
from typing import Callable, Dict, Optional

import requests

from image_proxy.config import Settings
from image_proxy.schemas.proxy import ParsedTarget, UpstreamImage
from image_proxy.utils.constants import (
    BACKOFF_BASE_SECONDS,
    BACKOFF_STEP_SECONDS,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_REFERER,
    UPSTREAM_ACCEPT,
    UPSTREAM_MAX_ATTEMPTS,
    UPSTREAM_TIMEOUT_SECONDS,
    UPSTREAM_USER_AGENT,
)
from image_proxy.utils.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


def build_upstream_headers(referer: str = DEFAULT_REFERER) -> Dict[str, str]:
    """Заголовки, которые отправляются на каждый запрос к CDN"""
    return {
        "User-Agent": UPSTREAM_USER_AGENT,
        "Accept": UPSTREAM_ACCEPT,
        "Referer": referer,
        # Всегда идём в origin, мимо промежуточных кешей
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


def backoff_delay(attempt_index: int) -> float:
    """Задержка после неудачной попытки: 0.5с, 1.0с, 1.5с..."""
    return BACKOFF_BASE_SECONDS + attempt_index * BACKOFF_STEP_SECONDS


class UpstreamFetcher:
    """
    GET к upstream с фиксированными заголовками и линейным backoff.

    Попытка успешна только при статусе 2xx. Не-2xx статус и сетевые ошибки
    (таймаут, DNS, обрыв соединения) считаются неудачной попыткой и
    повторяются; после исчерпания попыток бросается UpstreamUnavailable
    с последней ошибкой.
    """

    def __init__(
        self,
        referer: str = DEFAULT_REFERER,
        timeout: float = UPSTREAM_TIMEOUT_SECONDS,
        max_attempts: int = UPSTREAM_MAX_ATTEMPTS,
        session_factory: Callable[[], requests.Session] = requests.Session,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.headers = build_upstream_headers(referer)
        self.timeout = timeout
        self.max_attempts = max_attempts
        self._session_factory = session_factory
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamFetcher":
        return cls(referer=settings.upstream_referer, timeout=settings.upstream_timeout)

    def fetch(self, target: ParsedTarget) -> UpstreamImage:
        last_error: Optional[str] = None
        session = self._session_factory()
        try:
            for attempt in range(self.max_attempts):
                try:
                    response = session.get(
                        target.url,
                        headers=self.headers,
                        timeout=self.timeout,
                        allow_redirects=True,
                    )
                except requests.RequestException as e:
                    last_error = str(e) or e.__class__.__name__
                    logger.warning(f"Upstream: попытка {attempt + 1}/{self.max_attempts} не удалась ({target.hostname}): {last_error}")
                else:
                    if 200 <= response.status_code < 300:
                        if attempt:
                            logger.info(f"Upstream: {target.hostname} ответил с попытки {attempt + 1}")
                        return UpstreamImage(
                            body=response.content,
                            content_type=response.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE,
                            status_code=response.status_code,
                            attempts=attempt + 1,
                        )
                    last_error = f"Upstream {response.status_code}"
                    logger.warning(f"Upstream: попытка {attempt + 1}/{self.max_attempts} вернула HTTP {response.status_code} ({target.hostname})")

                if attempt + 1 < self.max_attempts:
                    self._sleep(backoff_delay(attempt))
        finally:
            session.close()

        logger.error(f"Upstream: {target.url} недоступен после {self.max_attempts} попыток: {last_error}")
        raise UpstreamUnavailable(last_error, attempts=self.max_attempts)
