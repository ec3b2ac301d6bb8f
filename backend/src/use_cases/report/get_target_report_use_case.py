from core.domain.target_report import TargetReport
from core.exceptions.target_not_found_error import TargetNotFoundError
from core.port.target_registry import TargetRegistry
from use_cases.report.generate_target_report_use_case import GenerateTargetReportUseCase


class GetTargetReportUseCase:
    def __init__(
        self,
        target_registry: TargetRegistry,
        generate_report_use_case: GenerateTargetReportUseCase,
    ) -> None:
        self.target_registry = target_registry
        self.generate_report_use_case = generate_report_use_case

    async def execute(self, key: str) -> TargetReport:
        target = await self.target_registry.get(key)

        if not target:
            raise TargetNotFoundError(key)

        return await self.generate_report_use_case.execute(target)
