from .logger_factory_service import configure_logging, get_logger
from .redaction_service import authorization_scheme, redact_dict

__all__ = [
    "configure_logging",
    "get_logger",
    "authorization_scheme",
    "redact_dict",
]
