"""Application-layer errors — misuse or misconfiguration of the adapter."""

from __future__ import annotations

from smartsender_mailer.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The adapter was configured or called incorrectly."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
