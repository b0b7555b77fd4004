"""Application email – MailProvider, LocalProcessing and Mailer protocols (ports)."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from smartsender_mailer.application.email.message import (
    DispatchRequest,
    EmailContent,
    EmailIdentity,
)
from smartsender_mailer.application.email.outcome import DispatchOutcome

__all__ = ["LocalProcessing", "MailProvider", "Mailer"]


@runtime_checkable
class MailProvider(Protocol):
    """Port: a remote service that delivers email and keeps a suppression list."""

    supports_attachments: bool

    def can_use_service(self) -> bool:
        """Return ``True`` when the provider has everything it needs to operate."""
        ...

    async def reactivate(self, recipient: EmailIdentity) -> None:
        """Remove *recipient* from the provider's suppression list.

        Raises :class:`~smartsender_mailer.kernel.errors.EmailError` on failure.
        """
        ...

    async def send(self, request: DispatchRequest) -> DispatchOutcome:
        """Send one message. Never raises; failures come back as outcomes."""
        ...


@runtime_checkable
class LocalProcessing(Protocol):
    """Port: the caller's own suppression bookkeeping."""

    async def enable_mail_locally(self, recipient: EmailIdentity) -> None:
        """Mark *recipient* deliverable again in local records.

        Raises :class:`~smartsender_mailer.kernel.errors.BaseError` on failure.
        """
        ...


@runtime_checkable
class Mailer(Protocol):
    """Port: the public send surface used by application code."""

    def can_use_service(self) -> bool: ...

    async def send_email(
        self,
        content: EmailContent,
        to: EmailIdentity | None,
        from_: EmailIdentity | None = None,
        reply_to: EmailIdentity | None = None,
        to_disabled: bool = False,
    ) -> DispatchOutcome: ...
