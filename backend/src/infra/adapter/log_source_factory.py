from functools import lru_cache

import httpx

from core.port.log_source import LogSource
from infra.adapter.file_log_source import FileLogSource
from infra.adapter.http_log_source import HttpLogSource
from infra.config.config import get_config


@lru_cache
def get_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
        follow_redirects=True,
    )


@lru_cache
def get_log_source() -> LogSource:
    report_config = get_config().REPORT_CONFIG

    if report_config.LOG_SOURCE == "http":
        return HttpLogSource(
            base_url=report_config.LOGS_BASE_URL,
            http_client=get_http_client(),
            timeout_seconds=report_config.FETCH_TIMEOUT_SECONDS,
        )

    return FileLogSource(report_config.LOGS_DIR)


async def close_http_client() -> None:
    if get_http_client.cache_info().currsize == 0:
        return

    await get_http_client().aclose()
    get_http_client.cache_clear()
