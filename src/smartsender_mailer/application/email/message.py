"""Application email – identity, content and request value objects."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Attachment", "DispatchRequest", "EmailContent", "EmailIdentity"]


@dataclass(frozen=True)
class EmailIdentity:
    """A mailbox: address plus optional display name.

    The address is expected to be validated by the caller.
    """

    address: str
    display_name: str = ""

    def formatted(self) -> str:
        """Return ``Name <address>``, or ``<address>`` when there is no name."""
        if self.display_name:
            return f"{self.display_name} <{self.address}>"
        return f"<{self.address}>"


@dataclass(frozen=True)
class Attachment:
    """A file attachment for an email."""

    filename: str
    content_type: str
    data: bytes

    def __repr__(self) -> str:  # pragma: no cover
        return f"Attachment(filename={self.filename!r}, content_type={self.content_type!r}, size={len(self.data)})"


@dataclass(frozen=True)
class EmailContent:
    """What to send, independent of who sends it and to whom."""

    subject: str
    html_body: str
    tag: str = ""
    attachments: tuple[Attachment, ...] = ()
    unsubscribe_link_url: str | None = None
    unsubscribe_mail_address: str | None = None
    supports_one_click_unsubscribe: bool = False

    def __post_init__(self) -> None:
        # accept any ordered sequence but store it immutably
        object.__setattr__(self, "attachments", tuple(self.attachments))

    @property
    def has_attachments(self) -> bool:
        return bool(self.attachments)


@dataclass(frozen=True)
class DispatchRequest:
    """Everything a single dispatch needs; built once per call."""

    content: EmailContent
    recipient: EmailIdentity | None
    sender: EmailIdentity | None = None
    reply_to: EmailIdentity | None = None
    recipient_was_suppressed: bool = False
