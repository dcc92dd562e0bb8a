from task_control_panel.application.core.domain.exceptions.domain_error import DomainError


class UnauthorizedError(DomainError):
    """Raised when a request does not carry the shared bearer token."""
