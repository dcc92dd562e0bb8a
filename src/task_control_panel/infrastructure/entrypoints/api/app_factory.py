from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from task_control_panel.application.core.domain.exceptions.malformed_request_error import (
    MalformedRequestError,
)
from task_control_panel.application.core.domain.exceptions.unauthorized_error import (
    UnauthorizedError,
)
from task_control_panel.application.core.services.task_store import TaskStore
from task_control_panel.infrastructure.configuration.main_settings import Settings
from task_control_panel.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from task_control_panel.infrastructure.entrypoints.api.task_router import (
    router as task_router,
)
from task_control_panel.infrastructure.entrypoints.api.ui_router import router as ui_router
from task_control_panel.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from task_control_panel.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from task_control_panel.infrastructure.observability.metrics_service import TASKS_STORED
from task_control_panel.infrastructure.observability.redaction_service import redact_dict
from task_control_panel.infrastructure.repositories.task_store_file_adapter import (
    TaskStoreFileAdapter,
)

logger = get_logger("app_factory")

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[3] / "static"


def create_app(settings: Settings, store: Optional[TaskStore] = None) -> FastAPI:
    configure_logging(settings.log_level)
    logger.info(
        "Boot diagnostics",
        settings=redact_dict(settings.model_dump(mode="json")),
    )
    if settings.uses_default_token:
        logger.warning("Placeholder API token in use; set --token or TASK_PANEL_TOKEN")

    if store is None:
        store = TaskStore(TaskStoreFileAdapter(settings.tasks_file))
    TASKS_STORED.set(store.count())

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.task_store = store
    app.add_middleware(CorrelationMiddleware)

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "unauthorized"},
        )

    @app.exception_handler(MalformedRequestError)
    async def malformed_request_handler(request: Request, exc: MalformedRequestError):
        logger.warning("Malformed request body", error_type="MalformedRequestError", error_details=exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
            for error in exc.errors()
        )
        logger.warning("Request validation failed", error_type="RequestValidationError", error_details=message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    app.include_router(health_router)
    app.include_router(task_router)
    app.include_router(ui_router)
    app.mount(
        "/static",
        StaticFiles(directory=settings.static_dir or DEFAULT_STATIC_DIR),
        name="static",
    )

    return app
