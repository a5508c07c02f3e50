from typing import Any, Protocol
from urllib.parse import quote

import httpx

from . import config


class DudaApiError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CollectionSource(Protocol):
    async def get(self, site: str, collection: str) -> Any: ...


class DudaClient:
    """
    Minimal async client for the Duda Partner API collections endpoint.
    Only `get` is used; everything else about the collection is opaque here.
    """

    def __init__(
        self,
        user: str,
        password: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._auth = httpx.BasicAuth(user, password)
        self._base_url = (base_url or config.DUDA_API_BASE_URL).rstrip("/")
        self._timeout = config.DUDA_API_TIMEOUT if timeout is None else timeout
        self._transport = transport

    def collection_url(self, site: str, collection: str) -> str:
        return (
            f"{self._base_url}/sites/multiscreen/"
            f"{quote(site, safe='')}/collection/{quote(collection, safe='')}"
        )

    async def get(self, site: str, collection: str) -> Any:
        url = self.collection_url(site, collection)
        async with httpx.AsyncClient(
            auth=self._auth, timeout=self._timeout, transport=self._transport
        ) as http:
            r = await http.get(url, headers={"Accept": "application/json"})
        if r.status_code != 200:
            raise DudaApiError(f"Duda GET collection failed ({r.status_code}): {r.text}", r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise DudaApiError(f"Duda response is not valid JSON: {e}", r.status_code)
