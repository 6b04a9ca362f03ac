"""
Разбор URL изображения из query параметра
"""
from typing import Optional

from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from image_proxy.schemas.proxy import ParsedTarget
from image_proxy.utils.errors import MalformedURL, MissingParameter

# Символы, которых не может быть в имени хоста (кроме IPv6 в скобках)
FORBIDDEN_HOST_CHARS = frozenset('#%/:<>?@[\\]^|')


def is_valid_hostname(host: str) -> bool:
    """Без пробелов, управляющих и служебных символов"""
    if host.startswith("[") and host.endswith("]"):
        return True
    return not any(
        char.isspace() or not char.isprintable() or char in FORBIDDEN_HOST_CHARS
        for char in host
    )


def parse_target(raw: Optional[str]) -> ParsedTarget:
    """
    Превращает строку клиента в ParsedTarget.

    Проверка чисто синтаксическая (без DNS): нужен абсолютный URL со схемой
    и хостом. Пустое значение даёт MissingParameter, всё остальное
    непригодное даёт MalformedURL.

    Разбираем тем же парсером urllib3, которым requests строит запрос,
    и в upstream уходит пересобранный им URL: хост, который проверяет
    whitelist, всегда совпадает с хостом, к которому подключается requests.
    Иначе `http://evil.example.com\\@ppr.im-cdn.it/` urlsplit отнёс бы
    к ppr.im-cdn.it, а requests пошёл бы на evil.example.com.
    """
    if not raw:
        raise MissingParameter("url")

    try:
        parsed = parse_url(raw.strip())
    except (LocationParseError, ValueError):
        raise MalformedURL(raw)

    if not parsed.scheme or not parsed.host or not is_valid_hostname(parsed.host):
        raise MalformedURL(raw)

    return ParsedTarget(
        url=parsed.url,
        scheme=parsed.scheme.lower(),
        hostname=parsed.host.lower(),
        path=parsed.path or "",
        query=parsed.query or "",
    )
