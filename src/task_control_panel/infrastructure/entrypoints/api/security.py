import secrets
from typing import Optional

from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from task_control_panel.application.core.domain.exceptions.unauthorized_error import (
    UnauthorizedError,
)
from task_control_panel.infrastructure.configuration.main_settings import Settings
from task_control_panel.infrastructure.observability.logger_factory_service import get_logger
from task_control_panel.infrastructure.observability.metrics_service import AUTH_FAILURES_TOTAL
from task_control_panel.infrastructure.observability.redaction_service import (
    authorization_scheme,
)

logger = get_logger("security")

authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


async def require_bearer_token(
    request: Request,
    authorization: Optional[str] = Security(authorization_header),
) -> None:
    settings: Settings = request.app.state.settings
    expected = f"Bearer {settings.token.get_secret_value()}"
    if authorization and secrets.compare_digest(authorization.encode(), expected.encode()):
        return

    AUTH_FAILURES_TOTAL.inc()
    logger.warning(
        "Rejected API request",
        authorization_scheme=authorization_scheme(authorization),
        client=request.client.host if request.client else None,
    )
    raise UnauthorizedError()
