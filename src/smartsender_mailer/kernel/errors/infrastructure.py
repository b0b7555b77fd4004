"""Infrastructure errors — encoding, transport and provider failures."""

from __future__ import annotations

from typing import Any

from smartsender_mailer.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure talking to the mail provider."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """The connection to the provider could not be established."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class SerializationError(InfrastructureError):
    """A request payload could not be encoded."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """The request went out but no usable response came back."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class EmailError(InfrastructureError):
    """A mail provider refused or could not perform an operation.

    ``errors`` holds the provider-reported error strings, if any; ``message``
    is the first of them.
    """

    default_code = "email_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[str] = list(errors) if errors else [message]
        self.detail.setdefault("errors", self.errors)


__all__ = [
    "ConnectionError",
    "EmailError",
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
]
