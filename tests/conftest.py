from typing import Any

import httpx
import pytest
import pytest_asyncio

from main import app, get_client_factory

CAR_COLLECTION = {
    "name": "CarCatalog",
    "customer_lock": "unlocked",
    "fields": [
        {"name": "RenderName", "type": "text"},
        {"name": "Image", "type": "image"},
        {"name": "WindowParts", "type": "multi_select", "multi_select_options": ["Front", "Rear"]},
    ],
    "values": [
        {
            "id": "1",
            "page_item_url": "sedan-a",
            "data": {"RenderName": "Sedan A", "Image": "http://x/a.png", "WindowParts": ["Front"], "Year": 2021},
        },
        {
            "id": "2",
            "data": {"RenderName": "Coupe B", "WindowParts": ["Rear", "Rear", "Sunroof"]},
        },
        {"id": "3", "data": {"RenderName": "   ", "Image": "http://x/blank.png"}},
    ],
}


class FakeDuda:
    """Stands in for DudaClient; records every call."""

    def __init__(self, payload: Any = None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.credentials: tuple[str, str] | None = None

    def factory(self, user: str, password: str) -> "FakeDuda":
        self.credentials = (user, password)
        return self

    async def get(self, site: str, collection: str) -> Any:
        self.calls.append((site, collection))
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def duda_credentials(monkeypatch):
    monkeypatch.setenv("DUDA_API_USERNAME", "api-user")
    monkeypatch.setenv("DUDA_API_PASSWORD", "api-pass")


@pytest.fixture
def fake_duda():
    return FakeDuda(payload=CAR_COLLECTION)


@pytest_asyncio.fixture
async def async_test_client(fake_duda, duda_credentials):
    app.dependency_overrides[get_client_factory] = lambda: fake_duda.factory
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_client_factory, None)
