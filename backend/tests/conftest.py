from collections.abc import AsyncGenerator, Generator

import httpx
import pytest

from infra.adapter.file_target_registry import get_target_registry
from infra.adapter.log_source_factory import get_http_client, get_log_source
from infra.config.config import get_config


@pytest.fixture(autouse=True)
def _isolate_report_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "REPORT_CONFIG__MAX_DAYS",
        "REPORT_CONFIG__TARGETS_FILE",
        "REPORT_CONFIG__LOG_SOURCE",
        "REPORT_CONFIG__LOGS_DIR",
        "REPORT_CONFIG__LOGS_BASE_URL",
        "REPORT_CONFIG__TIMEZONE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_cached_singletons() -> Generator[None, None, None]:
    cacheables = [
        get_config,
        get_target_registry,
        get_log_source,
        get_http_client,
    ]

    for cacheable in cacheables:
        cacheable.cache_clear()

    yield

    for cacheable in cacheables:
        cacheable.cache_clear()


@pytest.fixture
async def async_client_factory() -> AsyncGenerator:
    clients: list[httpx.AsyncClient] = []

    async def _factory(app, *, raise_app_exceptions: bool = True) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        client = httpx.AsyncClient(transport=transport, base_url="http://testserver")
        clients.append(client)
        return client

    try:
        yield _factory
    finally:
        for client in clients:
            await client.aclose()
