import httpx
import pytest
from httpx import ASGITransport

MAKCORPS_URL = "https://api.makcorps.com/hotels"
GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-1.5-flash-latest:generateContent"
)


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("MAKCORPS_API_KEY", "test-makcorps-key")
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("ITINERARY_PROVIDER", "gemini")
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)


@pytest.fixture
def no_keys_env(monkeypatch):
    monkeypatch.setenv("MAKCORPS_API_KEY", "")
    monkeypatch.setenv("GEMINI_API_KEY", "")
    monkeypatch.setenv("ITINERARY_PROVIDER", "gemini")


async def _app_client():
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def client(mock_env):
    async for c in _app_client():
        yield c


@pytest.fixture
async def unconfigured_client(no_keys_env):
    async for c in _app_client():
        yield c
