"""Application email – ports, value objects and the dispatch flow."""
from smartsender_mailer.application.email.message import (
    Attachment,
    DispatchRequest,
    EmailContent,
    EmailIdentity,
)
from smartsender_mailer.application.email.outcome import DispatchOutcome
from smartsender_mailer.application.email.ports import LocalProcessing, Mailer, MailProvider
from smartsender_mailer.application.email.dispatch import (
    ATTACHMENTS_NOT_SUPPORTED,
    MISSING_RECIPIENT,
    dispatch_email,
)
from smartsender_mailer.application.email.in_memory import InMemoryLocalProcessing, InMemoryMailer

__all__ = [
    "ATTACHMENTS_NOT_SUPPORTED",
    "Attachment",
    "DispatchOutcome",
    "DispatchRequest",
    "EmailContent",
    "EmailIdentity",
    "InMemoryLocalProcessing",
    "InMemoryMailer",
    "LocalProcessing",
    "MISSING_RECIPIENT",
    "MailProvider",
    "Mailer",
    "dispatch_email",
]
