from task_control_panel.application.core.domain.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """
    Base class for all infrastructure layer exceptions.
    These are domain errors caused by infrastructure failures.
    """
    pass
