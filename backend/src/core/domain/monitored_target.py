from dataclasses import dataclass


@dataclass(frozen=True)
class MonitoredTarget:
    key: str
    url: str

    @property
    def log_file_name(self) -> str:
        return f"{self.key}_report.log"
