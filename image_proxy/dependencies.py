"""
Dependency injection для FastAPI
"""
import logging
from functools import lru_cache

from image_proxy.config import settings
from image_proxy.services.host_authorizer import HostAuthorizer
from image_proxy.services.upstream_fetcher import UpstreamFetcher

logger = logging.getLogger(__name__)


@lru_cache()
def get_host_authorizer() -> HostAuthorizer:
    """Whitelist строится один раз на процесс"""
    authorizer = HostAuthorizer.from_settings(settings)
    logger.info(f"Whitelist: {', '.join(authorizer.hosts) or '(none)'}")
    return authorizer


@lru_cache()
def get_upstream_fetcher() -> UpstreamFetcher:
    return UpstreamFetcher.from_settings(settings)


__all__ = [
    'get_host_authorizer',
    'get_upstream_fetcher',
]
