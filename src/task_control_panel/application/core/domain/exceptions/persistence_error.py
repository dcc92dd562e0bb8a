from __future__ import annotations

from task_control_panel.application.core.domain.exceptions.infra_error import InfraError


class PersistenceError(InfraError):
    """Raised when the task list cannot be written to durable storage."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
