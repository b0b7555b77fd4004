"""Observability – structured logging helpers."""
from smartsender_mailer.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from smartsender_mailer.observability.logging.factory import JsonLoggerFactory
from smartsender_mailer.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
