"""Unit tests for dispatch_email orchestration, using fake collaborators."""
from __future__ import annotations

import asyncio

from smartsender_mailer.application.email import (
    ATTACHMENTS_NOT_SUPPORTED,
    MISSING_RECIPIENT,
    Attachment,
    DispatchOutcome,
    DispatchRequest,
    EmailContent,
    EmailIdentity,
    InMemoryLocalProcessing,
    MailProvider,
    dispatch_email,
)
from smartsender_mailer.kernel.errors import EmailError


class FakeProvider:
    """MailProvider that records the order of calls into a shared journal."""

    supports_attachments = False

    def __init__(self, journal: list[str], reactivate_error: str | None = None) -> None:
        self.journal = journal
        self.reactivate_error = reactivate_error

    def can_use_service(self) -> bool:
        return True

    async def reactivate(self, recipient: EmailIdentity) -> None:
        self.journal.append(f"remote:{recipient.address}")
        if self.reactivate_error:
            raise EmailError(self.reactivate_error)

    async def send(self, request: DispatchRequest) -> DispatchOutcome:
        self.journal.append("send")
        return DispatchOutcome.success('{"result":1,"message_id":"m-1"}', "m-1")


class JournalLocalProcessing(InMemoryLocalProcessing):
    def __init__(self, journal: list[str], failing: set[str] | None = None) -> None:
        super().__init__(failing)
        self.journal = journal

    async def enable_mail_locally(self, recipient: EmailIdentity) -> None:
        self.journal.append(f"local:{recipient.address}")
        await super().enable_mail_locally(recipient)


def _request(**overrides: object) -> DispatchRequest:
    fields: dict[str, object] = {
        "content": EmailContent(subject="Hi", html_body="<p>Hi</p>", tag="welcome"),
        "recipient": EmailIdentity("ann@example.com", "Ann"),
    }
    fields.update(overrides)
    return DispatchRequest(**fields)  # type: ignore[arg-type]


class TestDispatchEmail:
    def test_fake_provider_satisfies_port(self) -> None:
        assert isinstance(FakeProvider([]), MailProvider)

    def test_plain_send(self) -> None:
        journal: list[str] = []
        outcome = asyncio.run(dispatch_email(FakeProvider(journal), JournalLocalProcessing(journal), _request()))
        assert outcome.succeeded
        assert outcome.provider_message_id == "m-1"
        assert journal == ["send"]

    def test_missing_recipient(self) -> None:
        journal: list[str] = []
        outcome = asyncio.run(
            dispatch_email(FakeProvider(journal), JournalLocalProcessing(journal), _request(recipient=None))
        )
        assert outcome == DispatchOutcome.failure(MISSING_RECIPIENT)
        assert journal == []

    def test_attachments_rejected_before_any_call(self) -> None:
        journal: list[str] = []
        att = Attachment(filename="a.txt", content_type="text/plain", data=b"x")
        content = EmailContent(subject="s", html_body="h", attachments=(att,))
        outcome = asyncio.run(
            dispatch_email(
                FakeProvider(journal),
                JournalLocalProcessing(journal),
                _request(content=content, recipient_was_suppressed=True),
            )
        )
        assert outcome.succeeded is False
        assert outcome.message == ATTACHMENTS_NOT_SUPPORTED
        assert journal == []

    def test_attachments_allowed_when_provider_supports_them(self) -> None:
        journal: list[str] = []
        provider = FakeProvider(journal)
        provider.supports_attachments = True
        att = Attachment(filename="a.txt", content_type="text/plain", data=b"x")
        content = EmailContent(subject="s", html_body="h", attachments=(att,))
        outcome = asyncio.run(dispatch_email(provider, JournalLocalProcessing(journal), _request(content=content)))
        assert outcome.succeeded
        assert journal == ["send"]

    def test_reactivation_runs_remote_then_local_then_send(self) -> None:
        journal: list[str] = []
        outcome = asyncio.run(
            dispatch_email(
                FakeProvider(journal),
                JournalLocalProcessing(journal),
                _request(recipient_was_suppressed=True),
            )
        )
        assert outcome.succeeded
        assert journal == ["remote:ann@example.com", "local:ann@example.com", "send"]

    def test_remote_reactivation_failure_aborts(self) -> None:
        journal: list[str] = []
        outcome = asyncio.run(
            dispatch_email(
                FakeProvider(journal, reactivate_error="bad key"),
                JournalLocalProcessing(journal),
                _request(recipient_was_suppressed=True),
            )
        )
        assert outcome == DispatchOutcome.failure("bad key")
        assert journal == ["remote:ann@example.com"]

    def test_local_reactivation_failure_aborts(self) -> None:
        journal: list[str] = []
        local = JournalLocalProcessing(journal, failing={"ann@example.com"})
        outcome = asyncio.run(
            dispatch_email(FakeProvider(journal), local, _request(recipient_was_suppressed=True))
        )
        assert outcome.succeeded is False
        assert outcome.message == "Cannot enable ann@example.com locally"
        assert journal == ["remote:ann@example.com", "local:ann@example.com"]
        assert local.enabled == []

    def test_unexpected_local_error_becomes_outcome(self) -> None:
        class BrokenLocalProcessing:
            async def enable_mail_locally(self, recipient: EmailIdentity) -> None:
                raise RuntimeError("database is down")

        journal: list[str] = []
        outcome = asyncio.run(
            dispatch_email(FakeProvider(journal), BrokenLocalProcessing(), _request(recipient_was_suppressed=True))
        )
        assert outcome == DispatchOutcome.failure("database is down")
        assert journal == ["remote:ann@example.com"]
