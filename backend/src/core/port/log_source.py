from abc import ABC, abstractmethod

from core.domain.monitored_target import MonitoredTarget


class LogSource(ABC):
    @abstractmethod
    async def fetch(self, target: MonitoredTarget) -> str:
        """Return the raw report log text, or an empty string when it is unavailable."""
        raise NotImplementedError
