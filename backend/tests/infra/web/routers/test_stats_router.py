import time

import pytest
from fastapi import FastAPI

import infra.web.routers.stats_router as stats_router_module


@pytest.fixture
def stats_app() -> FastAPI:
    app = FastAPI()
    app.include_router(stats_router_module.router)
    return app


@pytest.mark.asyncio
async def test_stats_health_up_response(
    stats_app: FastAPI,
    async_client_factory,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(stats_router_module, "_start_time", time.time() - 5_430)

    client = await async_client_factory(stats_app)
    response = await client.get("/stats/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "UP"
    assert payload["uptime"] == "1h 30m"
    assert payload["app_name"] == "uptime-report"
