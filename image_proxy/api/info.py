"""
Информационная страница
"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from image_proxy.dependencies import get_host_authorizer
from image_proxy.services.host_authorizer import HostAuthorizer
from image_proxy.utils.constants import SERVICE_NAME

router = APIRouter()


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Информация о сервисе",
    description="Как пользоваться прокси и какие домены разрешены",
)
async def index(authorizer: HostAuthorizer = Depends(get_host_authorizer)):
    return "\n".join([
        f"{SERVICE_NAME} is up.",
        "Use: /img?url=<URL-ENCODED-IMAGE-URL>",
        f"Allowed hosts: {', '.join(authorizer.hosts) or '(none)'}",
    ])
