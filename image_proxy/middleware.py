"""
CORS для всех ответов, включая ошибки и preflight
"""
import logging

from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from image_proxy.services.relay import relay_error, with_cors
from image_proxy.utils.errors import InternalFault

logger = logging.getLogger(__name__)


class CorsMiddleware(BaseHTTPMiddleware):
    """
    OPTIONS на любой путь отвечаем 204 до роутинга.

    Непойманные исключения превращаем в 500 здесь, а не в exception handler:
    обработчики Exception в Starlette работают снаружи пользовательских
    middleware, и ответ ушёл бы без CORS заголовков.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return with_cors(Response(status_code=204))

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"Необработанная ошибка на {request.method} {request.url.path}: {e}")
            return relay_error(InternalFault(e))

        return with_cors(response)
