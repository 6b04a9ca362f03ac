"""
Главный роутер для объединения всех API endpoints
"""
from fastapi import APIRouter

from image_proxy.api import image, info

router = APIRouter()

# Подключаем все роутеры
router.include_router(info.router, tags=["info"])
router.include_router(image.router, tags=["proxy"])
