"""Application email – in-memory Mailer and LocalProcessing for unit tests."""
from __future__ import annotations

import uuid

from smartsender_mailer.application.email.dispatch import ATTACHMENTS_NOT_SUPPORTED, MISSING_RECIPIENT
from smartsender_mailer.application.email.message import DispatchRequest, EmailContent, EmailIdentity
from smartsender_mailer.application.email.outcome import DispatchOutcome
from smartsender_mailer.kernel.errors import EmailError

__all__ = ["InMemoryLocalProcessing", "InMemoryMailer"]


class InMemoryLocalProcessing:
    """Fake LocalProcessing that records reactivated addresses.

    Addresses listed in ``failing`` raise :class:`EmailError` instead.
    """

    def __init__(self, failing: set[str] | None = None) -> None:
        self.enabled: list[EmailIdentity] = []
        self.failing: set[str] = set(failing or ())

    async def enable_mail_locally(self, recipient: EmailIdentity) -> None:
        if recipient.address in self.failing:
            raise EmailError(f"Cannot enable {recipient.address} locally")
        self.enabled.append(recipient)

    def reset(self) -> None:
        self.enabled.clear()


class InMemoryMailer:
    """Fake Mailer that captures dispatch requests in memory.

    Mirrors the real adapter's input checks so callers see the same failures.
    """

    def __init__(self, supports_attachments: bool = False) -> None:
        self.supports_attachments = supports_attachments
        self.sent: list[DispatchRequest] = []

    def can_use_service(self) -> bool:
        return True

    async def send_email(
        self,
        content: EmailContent,
        to: EmailIdentity | None,
        from_: EmailIdentity | None = None,
        reply_to: EmailIdentity | None = None,
        to_disabled: bool = False,
    ) -> DispatchOutcome:
        if to is None:
            return DispatchOutcome.failure(MISSING_RECIPIENT)
        if content.has_attachments and not self.supports_attachments:
            return DispatchOutcome.failure(ATTACHMENTS_NOT_SUPPORTED)
        self.sent.append(
            DispatchRequest(
                content=content,
                recipient=to,
                sender=from_,
                reply_to=reply_to,
                recipient_was_suppressed=to_disabled,
            )
        )
        return DispatchOutcome.success("Message sent", str(uuid.uuid4()))

    def reset(self) -> None:
        """Clear the outbox."""
        self.sent.clear()

    # convenience helpers
    @property
    def count(self) -> int:
        return len(self.sent)

    def last(self) -> DispatchRequest | None:
        return self.sent[-1] if self.sent else None
