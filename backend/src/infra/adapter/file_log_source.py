import asyncio
from pathlib import Path

import structlog

from core.domain.monitored_target import MonitoredTarget
from core.port.log_source import LogSource

logger = structlog.stdlib.get_logger(__name__)


class FileLogSource(LogSource):
    def __init__(self, logs_dir: str | Path) -> None:
        self.logs_dir = Path(logs_dir)

    async def fetch(self, target: MonitoredTarget) -> str:
        log_path = self.logs_dir / target.log_file_name

        try:
            return await asyncio.to_thread(log_path.read_text, encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"No report log for '{target.key}' at {log_path}")
            return ""
