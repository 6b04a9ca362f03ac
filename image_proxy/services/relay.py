"""
Формирование ответа клиенту
"""
from fastapi.responses import PlainTextResponse, Response

from image_proxy.schemas.proxy import UpstreamImage
from image_proxy.utils.constants import CLIENT_CACHE_CONTROL, CORS_HEADERS, DEFAULT_CONTENT_TYPE
from image_proxy.utils.errors import ProxyError


def with_cors(response: Response) -> Response:
    """Добавляет CORS заголовки к ответу"""
    response.headers.update(CORS_HEADERS)
    return response


def relay_image(image: UpstreamImage) -> Response:
    """200 с телом upstream без изменений и кешированием на 24 часа"""
    return with_cors(Response(
        content=image.body,
        status_code=200,
        headers={
            # Content-Type передаём как есть, без добавления charset
            "Content-Type": image.content_type or DEFAULT_CONTENT_TYPE,
            "Cache-Control": CLIENT_CACHE_CONTROL,
        },
    ))


def relay_error(error: ProxyError) -> Response:
    return with_cors(PlainTextResponse(error.message, status_code=error.status_code))
