"""
Ошибки обработки запроса к прокси.

Каждая ошибка знает свой HTTP статус и текст, который увидит клиент.
Все они перехватываются на границе запроса и превращаются в text/plain ответ.
"""
from typing import Optional


class ProxyError(Exception):
    """Базовая ошибка прокси"""

    status_code = 500

    @property
    def message(self) -> str:
        return str(self)


class MissingParameter(ProxyError):
    """Параметр url не передан или пустой"""

    status_code = 400

    def __init__(self, name: str = "url"):
        self.name = name
        super().__init__(f"Missing {name}")


class MalformedURL(ProxyError):
    """Строка не является абсолютным URL"""

    status_code = 400

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__("Invalid url")


class HostNotAllowed(ProxyError):
    """Домен не входит в whitelist"""

    status_code = 403

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__("Host not allowed")


class UpstreamUnavailable(ProxyError):
    """Upstream не ответил успешно ни на одну из попыток"""

    status_code = 502

    def __init__(self, last_error: Optional[str] = None, attempts: int = 0):
        self.last_error = last_error
        self.attempts = attempts
        super().__init__(last_error or "Upstream error")


class InternalFault(ProxyError):
    """Непредвиденная ошибка внутри обработчика"""

    status_code = 500

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)
