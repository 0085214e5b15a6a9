from __future__ import annotations

import os
from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from spotify_catalog.api import CatalogClient
from spotify_catalog.auth import TokenManager
from spotify_catalog.config.settings import ENV_PREFIX
from tests.factories import CountingSource, FakeClock


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials out of the test run."""

    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def source() -> CountingSource:
    return CountingSource()


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    client = httpx.AsyncClient()
    try:
        yield client
    finally:
        await client.aclose()


@pytest.fixture
def token_manager(
    source: CountingSource, clock: FakeClock, http_client: httpx.AsyncClient
) -> TokenManager:
    return TokenManager(source, http_client=http_client, clock=clock)


@pytest.fixture
def catalog_client(
    token_manager: TokenManager, http_client: httpx.AsyncClient
) -> CatalogClient:
    return CatalogClient(token_manager, http_client=http_client)
