import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from ses_mock.infrastructure.audit.filesystem_sink import FilesystemAuditSink
from ses_mock.infrastructure.clock import SystemClock
from ses_mock.infrastructure.message_ids import TimeBasedMessageIdGenerator
from ses_mock.logging import setup_logging
from ses_mock.presentation.api import api
from ses_mock.presentation.errors import register_error_handlers
from ses_mock.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "starting mock server",
        extra={"port": settings.port, "output_dir": str(settings.output_dir)},
    )
    yield
    logger.info("mock server stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="SES Mock", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    # One sink and one id generator per app, shared by every request
    app.state.audit_sink = FilesystemAuditSink(settings.output_dir, clock=SystemClock())
    app.state.message_ids = TimeBasedMessageIdGenerator()

    register_error_handlers(app)
    app.include_router(api)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
