from fastapi import APIRouter, HTTPException, status

from core.exceptions.log_parse_error import LogParseError
from core.exceptions.target_not_found_error import TargetNotFoundError
from infra.adapter.file_target_registry import get_target_registry
from infra.adapter.log_source_factory import get_log_source
from infra.config.config import get_config
from infra.web.routers.schemas.report import TargetReportResponseDTO
from use_cases.report.generate_all_reports_use_case import GenerateAllReportsUseCase
from use_cases.report.generate_target_report_use_case import GenerateTargetReportUseCase, utc_now
from use_cases.report.get_target_report_use_case import GetTargetReportUseCase

router = APIRouter(prefix="/reports", tags=["Reports"])


def _generate_report_use_case() -> GenerateTargetReportUseCase:
    report_config = get_config().REPORT_CONFIG

    return GenerateTargetReportUseCase(
        get_log_source(),
        max_days=report_config.MAX_DAYS,
        clock=utc_now,
        tz=report_config.get_tzinfo(),
    )


def _unprocessable_log(error: LogParseError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={
            "message": "Report log is malformed",
            "lineNumber": error.line_number,
            "reason": error.reason,
        },
    )


@router.get(
    "",
    response_model=list[TargetReportResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_all_reports() -> list[TargetReportResponseDTO]:
    """Build every registered target's report.

    All or nothing: a malformed log for any target fails the whole request
    with 422, naming the offending line.
    """
    use_case = GenerateAllReportsUseCase(get_target_registry(), _generate_report_use_case())

    try:
        reports = await use_case.execute()
    except LogParseError as e:
        raise _unprocessable_log(e)

    tz = get_config().REPORT_CONFIG.get_tzinfo()
    return [TargetReportResponseDTO.from_report(report, tz=tz) for report in reports]


@router.get(
    "/{key}",
    response_model=TargetReportResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_report(key: str) -> TargetReportResponseDTO:
    use_case = GetTargetReportUseCase(get_target_registry(), _generate_report_use_case())

    try:
        report = await use_case.execute(key)
    except TargetNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Target not found")
    except LogParseError as e:
        raise _unprocessable_log(e)

    return TargetReportResponseDTO.from_report(report, tz=get_config().REPORT_CONFIG.get_tzinfo())
