"""
FastAPI приложение: прокси изображений со сторонних CDN
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from image_proxy import __version__
from image_proxy.api.router import router
from image_proxy.config import settings
from image_proxy.dependencies import get_host_authorizer
from image_proxy.middleware import CorsMiddleware
from image_proxy.utils.constants import SERVICE_NAME

# Настройка логирования
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events для инициализации и очистки ресурсов"""
    # Startup
    logger.info("=" * 80)
    logger.info(f"🖼️  {SERVICE_NAME} v{__version__}")
    logger.info("=" * 80)
    logger.info(f"📡 Listening on http://{settings.host}:{settings.port}")
    logger.info(f"   Allowed hosts: {', '.join(get_host_authorizer().hosts) or '(none)'}")
    logger.info(f"   Upstream referer: {settings.upstream_referer}")
    logger.info(f"   Upstream timeout: {settings.upstream_timeout}s")
    logger.info("=" * 80)
    yield
    # Shutdown
    logger.info("Сервер остановлен")


# Создаём FastAPI приложение
app = FastAPI(
    title=SERVICE_NAME,
    description="""
    Прокси для загрузки изображений со сторонних CDN, которые не отдают картинки
    напрямую браузеру (нужен Referer/User-Agent или нет CORS).

    ## Возможности

    * Whitelist доменов (точное совпадение hostname)
    * Браузерные заголовки и настраиваемый Referer для upstream
    * 3 попытки с линейной задержкой 0.5с / 1с
    * CORS заголовки на всех ответах, включая ошибки
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS и перехват непредвиденных ошибок
app.add_middleware(CorsMiddleware)

# Подключаем роутеры
app.include_router(router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "image_proxy.main:app",
        host=settings.host,
        port=settings.port,
    )
