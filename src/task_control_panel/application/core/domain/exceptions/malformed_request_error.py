from task_control_panel.application.core.domain.exceptions.domain_error import DomainError


class MalformedRequestError(DomainError):
    """Raised when a request body does not parse into the expected task shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
