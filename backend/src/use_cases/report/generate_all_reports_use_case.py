import asyncio

import structlog

from core.domain.target_report import TargetReport
from core.port.target_registry import TargetRegistry
from use_cases.report.generate_target_report_use_case import GenerateTargetReportUseCase

logger = structlog.stdlib.get_logger(__name__)


class GenerateAllReportsUseCase:
    def __init__(
        self,
        target_registry: TargetRegistry,
        generate_report_use_case: GenerateTargetReportUseCase,
    ):
        self.target_registry = target_registry
        self.generate_report_use_case = generate_report_use_case

    async def execute(self) -> list[TargetReport]:
        targets = await self.target_registry.get_all()

        reports = await asyncio.gather(
            *(self.generate_report_use_case.execute(target) for target in targets)
        )

        logger.info(f"Generated {len(reports)} uptime reports")

        return list(reports)
