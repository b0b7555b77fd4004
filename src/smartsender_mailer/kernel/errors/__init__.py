"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── SerializationError
        ├── ExternalServiceError
        └── EmailError
"""

from smartsender_mailer.kernel.errors.application import ApplicationError
from smartsender_mailer.kernel.errors.base import BaseError
from smartsender_mailer.kernel.errors.infrastructure import (
    ConnectionError,
    EmailError,
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "EmailError",
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
]
