from abc import ABC, abstractmethod
from typing import Optional

from core.domain.monitored_target import MonitoredTarget


class TargetRegistry(ABC):
    @abstractmethod
    async def get_all(self) -> list[MonitoredTarget]:
        raise NotImplementedError

    async def get(self, key: str) -> Optional[MonitoredTarget]:
        for target in await self.get_all():
            if target.key == key:
                return target

        return None
