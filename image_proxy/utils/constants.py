"""
Константы проекта
"""
# Домены, разрешённые всегда (дополняются через ALLOWED_HOSTS)
DEFAULT_ALLOWED_HOSTS = ("ppr.im-cdn.it", "image.immobiliare.it")

# Referer, который ожидает CDN (переопределяется через UPSTREAM_REFERER)
DEFAULT_REFERER = "https://gestionale.immobiliare.it/"

# "Человеческие" заголовки для CDN, которые отклоняют запросы без браузерных заголовков
UPSTREAM_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120 Safari/537.36"
)
UPSTREAM_ACCEPT = "image/avif,image/webp,image/*,*/*;q=0.8"

# Ретраи к upstream
UPSTREAM_MAX_ATTEMPTS = 3
UPSTREAM_TIMEOUT_SECONDS = 30.0
BACKOFF_BASE_SECONDS = 0.5  # задержка после попытки i: base + i * step
BACKOFF_STEP_SECONDS = 0.5

# Ответ клиенту
DEFAULT_CONTENT_TYPE = "image/jpeg"
CLIENT_CACHE_CONTROL = "public, max-age=86400"  # 24 часа

# CORS заголовки, добавляются к каждому ответу (включая ошибки)
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,HEAD,OPTIONS",
    "Access-Control-Allow-Headers": "*",
    "Cross-Origin-Resource-Policy": "cross-origin",
    "Vary": "Origin",
}

SERVICE_NAME = "Florio Image Proxy"
