"""
Pydantic схемы для endpoint /img
"""
from pydantic import BaseModel, ConfigDict


class ParsedTarget(BaseModel):
    """Провалидированный URL изображения"""
    model_config = ConfigDict(frozen=True)

    url: str
    scheme: str
    hostname: str
    path: str = ""
    query: str = ""


class UpstreamImage(BaseModel):
    """Успешный ответ upstream"""
    model_config = ConfigDict(frozen=True)

    body: bytes
    content_type: str
    status_code: int = 200
    attempts: int = 1
