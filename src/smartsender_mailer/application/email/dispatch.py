"""Application email – dispatch_email, the orchestration of a single send.

The flow composes two independent capabilities: a remote
:class:`~smartsender_mailer.application.email.ports.MailProvider` and the
caller's :class:`~smartsender_mailer.application.email.ports.LocalProcessing`.
Every failure is folded into a :class:`DispatchOutcome`; nothing escapes this
function.
"""
from __future__ import annotations

from typing import Final

from smartsender_mailer.application.email.message import DispatchRequest
from smartsender_mailer.application.email.outcome import DispatchOutcome
from smartsender_mailer.application.email.ports import LocalProcessing, MailProvider
from smartsender_mailer.kernel.errors import BaseError
from smartsender_mailer.observability.logging import get_logger

__all__ = ["ATTACHMENTS_NOT_SUPPORTED", "MISSING_RECIPIENT", "dispatch_email"]

ATTACHMENTS_NOT_SUPPORTED: Final = "Contains attachments, this is not supported"
MISSING_RECIPIENT: Final = "Missing recipient"

logger = get_logger(__name__)


async def dispatch_email(
    provider: MailProvider,
    local_processing: LocalProcessing,
    request: DispatchRequest,
) -> DispatchOutcome:
    """Validate *request*, clear a suppressed recipient if asked, then send.

    Steps run strictly in order and stop at the first failure:

    1. reject a missing recipient or unsupported attachments (no I/O);
    2. when ``recipient_was_suppressed`` is set, reactivate the recipient on the
       provider, then locally;
    3. hand the request to the provider.
    """
    recipient = request.recipient
    if recipient is None:
        logger.warning("email_dispatch_rejected", reason="missing_recipient")
        return DispatchOutcome.failure(MISSING_RECIPIENT)

    log = logger.bind(recipient_domain=recipient.address.rpartition("@")[2], tag=request.content.tag)

    if request.content.has_attachments and not provider.supports_attachments:
        log.warning("email_dispatch_rejected", reason="attachments", count=len(request.content.attachments))
        return DispatchOutcome.failure(ATTACHMENTS_NOT_SUPPORTED)

    if request.recipient_was_suppressed:
        try:
            await provider.reactivate(recipient)
            await local_processing.enable_mail_locally(recipient)
        except BaseError as exc:
            log.warning("email_reactivation_failed", code=exc.code, error=exc.message)
            return DispatchOutcome.failure(exc.message)
        except Exception as exc:  # noqa: BLE001
            # local processing belongs to the caller and may raise anything
            log.exception("email_reactivation_crashed")
            return DispatchOutcome.failure(str(exc) or type(exc).__name__)
        log.info("email_recipient_reactivated")

    outcome = await provider.send(request)
    if outcome.succeeded:
        log.info("email_dispatched", provider_message_id=outcome.provider_message_id)
    else:
        log.warning("email_dispatch_failed", error=outcome.message)
    return outcome
