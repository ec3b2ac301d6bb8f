import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, status

from core.analytics.formatters import format_minutes
from infra.config.config import get_config

router = APIRouter(prefix="/stats", tags=["Stats"])

_start_time: float = time.time()


@router.get(
    "/health",
    response_model=dict[str, Any],
    status_code=status.HTTP_200_OK,
    summary="Get application health status",
)
async def get_health() -> dict[str, Any]:
    config = get_config()

    return {
        "status": "UP",
        "uptime": format_minutes(int((time.time() - _start_time) // 60)),
        "app_name": config.APP_NAME,
        "version": config.VERSION,
        "timestamp": datetime.now(timezone.utc),
    }
