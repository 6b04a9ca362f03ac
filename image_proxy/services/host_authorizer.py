"""
Whitelist доменов, с которых разрешено проксировать изображения
"""
import logging
from itertools import chain
from typing import Iterable, Tuple

from image_proxy.config import Settings
from image_proxy.utils.constants import DEFAULT_ALLOWED_HOSTS
from image_proxy.utils.errors import HostNotAllowed

logger = logging.getLogger(__name__)


class HostAuthorizer:
    """
    Неизменяемый набор разрешённых доменов.

    Сравнение только по точному совпадению hostname: никаких wildcard
    и суффиксов, поэтому cdn.ppr.im-cdn.it не пройдёт, если в списке
    только ppr.im-cdn.it.
    """

    def __init__(self, extra_hosts: Iterable[str] = (), defaults: Iterable[str] = DEFAULT_ALLOWED_HOSTS):
        normalized = (host.strip().lower() for host in chain(defaults, extra_hosts) if host and host.strip())
        # dict сохраняет порядок: сначала дефолтные, потом из окружения
        self._ordered: Tuple[str, ...] = tuple(dict.fromkeys(normalized))
        self._hosts = frozenset(self._ordered)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HostAuthorizer":
        return cls(extra_hosts=settings.extra_hosts)

    @property
    def hosts(self) -> Tuple[str, ...]:
        return self._ordered

    def is_allowed(self, hostname: str) -> bool:
        if not hostname:
            return False
        return hostname.lower() in self._hosts

    def authorize(self, hostname: str) -> None:
        """Бросает HostNotAllowed, если домена нет в whitelist"""
        if not self.is_allowed(hostname):
            logger.info(f"Домен не в whitelist: {hostname}")
            raise HostNotAllowed(hostname)
