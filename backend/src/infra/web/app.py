from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from infra.adapter.log_source_factory import close_http_client
from infra.config.config import get_config
from infra.logging.config import configure_logging
from infra.web.routers.report_router import router as report_router
from infra.web.routers.stats_router import router as stats_router

logger = structlog.stdlib.get_logger(__name__)


def create_app() -> FastAPI:
    config = get_config()

    configure_logging(
        log_level=config.LOGGING_CONFIG.LEVEL,
        json_logs=config.LOGGING_CONFIG.JSON_FORMAT,
        service_name=config.APP_NAME,
        environment=config.ENVIRONMENT,
        library_log_levels=config.LOGGING_CONFIG.LIBRARY_LOG_LEVELS,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info(
            f"Serving uptime reports for targets in {config.REPORT_CONFIG.TARGETS_FILE} "
            f"(source: {config.REPORT_CONFIG.LOG_SOURCE}, window: {config.REPORT_CONFIG.MAX_DAYS} days)"
        )

        yield
        await close_http_client()

    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        root_path=config.ROOT_PATH,
        docs_url="/apidocs",
        lifespan=lifespan,
    )

    app.state.host = config.HOST
    app.state.port = config.PORT

    app.include_router(stats_router)
    app.include_router(report_router)

    return app
