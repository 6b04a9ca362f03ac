"""
Конфигурация pytest
"""
import os
from unittest.mock import Mock

import pytest

# Устанавливаем тестовые переменные окружения до импорта приложения
os.environ.setdefault('ALLOWED_HOSTS', 'cdn.esempio.com, Img.Example.org ,,')
os.environ.setdefault('UPSTREAM_REFERER', 'https://referer.test/')

from fastapi.testclient import TestClient  # noqa: E402

from image_proxy.dependencies import get_upstream_fetcher  # noqa: E402
from image_proxy.main import app  # noqa: E402
from image_proxy.services.upstream_fetcher import UpstreamFetcher  # noqa: E402


def make_response(status_code=200, content=b'', content_type='image/jpeg'):
    """Мок ответа requests"""
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.headers = {'Content-Type': content_type} if content_type else {}
    return response


@pytest.fixture
def session():
    """Мок requests.Session, который отдаётся фетчеру"""
    return Mock()


@pytest.fixture
def sleep():
    return Mock()


@pytest.fixture
def fetcher(session, sleep):
    return UpstreamFetcher(
        referer='https://referer.test/',
        session_factory=lambda: session,
        sleep=sleep,
    )


@pytest.fixture
def client(fetcher):
    """TestClient с подменённым фетчером (без реальной сети)"""
    app.dependency_overrides[get_upstream_fetcher] = lambda: fetcher
    yield TestClient(app)
    app.dependency_overrides.clear()
