import httpx
import structlog

from core.domain.monitored_target import MonitoredTarget
from core.port.log_source import LogSource

logger = structlog.stdlib.get_logger(__name__)


class HttpLogSource(LogSource):
    def __init__(self, base_url: str, http_client: httpx.AsyncClient, timeout_seconds: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.timeout_seconds = timeout_seconds

    def log_url(self, target: MonitoredTarget) -> str:
        return f"{self.base_url}/{target.log_file_name}"

    async def fetch(self, target: MonitoredTarget) -> str:
        url = self.log_url(target)

        try:
            response = await self.http_client.get(url, timeout=self.timeout_seconds)
        except httpx.TimeoutException:
            logger.error(f"Timed out fetching report log for '{target.key}' (timeout: {self.timeout_seconds}s)")
            return ""
        except httpx.RequestError as e:
            logger.error(f"Failed to fetch report log for '{target.key}': {e}")
            return ""

        if not response.is_success:
            logger.warning(f"Report log for '{target.key}' unavailable: status_code={response.status_code}, url={url}")
            return ""

        return response.text
