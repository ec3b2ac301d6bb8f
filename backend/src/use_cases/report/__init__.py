from use_cases.report.generate_all_reports_use_case import GenerateAllReportsUseCase
from use_cases.report.generate_target_report_use_case import GenerateTargetReportUseCase
from use_cases.report.get_target_report_use_case import GetTargetReportUseCase

__all__ = [
    "GenerateAllReportsUseCase",
    "GenerateTargetReportUseCase",
    "GetTargetReportUseCase",
]
