from .domain_error import DomainError
from .infra_error import InfraError
from .malformed_request_error import MalformedRequestError
from .persistence_error import PersistenceError
from .unauthorized_error import UnauthorizedError

__all__ = [
    "DomainError",
    "InfraError",
    "MalformedRequestError",
    "PersistenceError",
    "UnauthorizedError",
]
