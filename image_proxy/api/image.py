"""
API endpoint для проксирования изображений
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from image_proxy.dependencies import get_host_authorizer, get_upstream_fetcher
from image_proxy.services.host_authorizer import HostAuthorizer
from image_proxy.services.relay import relay_error, relay_image
from image_proxy.services.upstream_fetcher import UpstreamFetcher
from image_proxy.services.url_validator import parse_target
from image_proxy.utils.errors import InternalFault, ProxyError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.head("/img", response_class=Response, include_in_schema=False)
@router.get(
    "/img",
    response_class=Response,
    summary="Прокси изображений",
    description="Загружает изображение с разрешённого CDN и отдаёт его с CORS заголовками",
    responses={
        200: {"content": {"image/*": {}}, "description": "Изображение из upstream"},
        400: {"description": "Missing url / Invalid url"},
        403: {"description": "Host not allowed"},
        502: {"description": "Upstream не ответил успешно за 3 попытки"},
    },
)
def proxy_image(
    url: Optional[str] = Query(None, description="URL-encoded адрес изображения"),
    authorizer: HostAuthorizer = Depends(get_host_authorizer),
    fetcher: UpstreamFetcher = Depends(get_upstream_fetcher),
):
    """
    Прокси для загрузки изображений со сторонних CDN

    Обычный def, а не async: FastAPI выполняет его в пуле потоков, поэтому
    блокирующий requests и паузы между ретраями не держат event loop.

    **Пример:**
    ```
    GET /img?url=https%3A%2F%2Fppr.im-cdn.it%2Fphoto.jpg
    ```
    """
    try:
        target = parse_target(url)
        authorizer.authorize(target.hostname)
        image = fetcher.fetch(target)
    except ProxyError as e:
        if e.status_code == 400:
            logger.info(f"Отклонён url={url!r}: {e.message}")
        return relay_error(e)
    except Exception as e:
        logger.exception(f"Ошибка при проксировании {url!r}: {e}")
        return relay_error(InternalFault(e))

    logger.info(
        f"{target.hostname}: HTTP {image.status_code}, {len(image.body)} байт, "
        f"{image.content_type}, попыток: {image.attempts}"
    )
    return relay_image(image)
