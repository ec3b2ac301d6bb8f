import asyncio
from functools import lru_cache
from pathlib import Path

import structlog

from core.domain.monitored_target import MonitoredTarget
from core.port.target_registry import TargetRegistry
from infra.config.config import get_config

logger = structlog.stdlib.get_logger(__name__)


def parse_target_lines(text: str) -> list[MonitoredTarget]:
    """Read ``key=url`` pairs, one per line. The first occurrence of a key wins."""
    targets: dict[str, MonitoredTarget] = {}

    for line in text.splitlines():
        if line.lstrip().startswith("#"):
            continue

        key, _, url = line.partition("=")
        key, url = key.strip(), url.strip()

        if not key or not url:
            continue

        if key in targets:
            logger.warning(f"Duplicate target key '{key}' ignored")
            continue

        targets[key] = MonitoredTarget(key=key, url=url)

    return list(targets.values())


class FileTargetRegistry(TargetRegistry):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def get_all(self) -> list[MonitoredTarget]:
        try:
            text = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        except FileNotFoundError:
            logger.warning(f"Target registry {self.path} not found, no targets to report on")
            return []

        return parse_target_lines(text)


@lru_cache
def get_target_registry() -> TargetRegistry:
    return FileTargetRegistry(get_config().REPORT_CONFIG.TARGETS_FILE)
