import httpx
import pytest
from fastapi.testclient import TestClient

from tubegate.config import Settings, get_settings
from tubegate.main import app, api_app, get_http_client

class FakeYouTube:
    """Stands in for the YouTube API and records every request it gets."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = b'{"items": []}'
        self.error = None

    def reply(self, status_code=200, json=None, content=None):
        self.status_code = status_code
        if json is not None:
            self.body = httpx.Response(200, json=json).content
        else:
            self.body = content

    def fail(self, error):
        self.error = error

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

@pytest.fixture
def test_settings():
    settings = Settings()
    settings.YOUTUBE_API_KEY = "test-key"
    settings.YOUTUBE_API_BASE = "https://youtube.test/youtube/v3"
    settings.MOCK_MODE = False
    return settings

@pytest.fixture
def upstream():
    return FakeYouTube()

@pytest.fixture
def http_client(upstream):
    with httpx.Client(transport=httpx.MockTransport(upstream.handle)) as c:
        yield c

def _override(application, test_settings, http_client):
    application.dependency_overrides[get_settings] = lambda: test_settings
    application.dependency_overrides[get_http_client] = lambda: http_client

@pytest.fixture
def client(test_settings, http_client):
    _override(app, test_settings, http_client)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture
def api_client(test_settings, http_client):
    _override(api_app, test_settings, http_client)
    with TestClient(api_app) as c:
        yield c
    api_app.dependency_overrides.clear()
