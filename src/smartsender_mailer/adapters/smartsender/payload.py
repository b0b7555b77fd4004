"""SmartSender adapter – request payload construction and encoding.

Send payload layout::

    {
        "key": ..., "secret": ...,
        "message": {
            "subject": ..., "html": ..., "tags": [tag],
            "to": [{"name": ..., "email": ...}],
            "from_email": ..., "from_name": ...,      # only with a sender
            "reply_to": [{"name": ..., "email": ...}]  # only with a reply-to
        },
        "headers": {...}                               # only when non-empty
    }
"""
from __future__ import annotations

import json
from typing import Any, Final

from smartsender_mailer.adapters.smartsender.config import SmartSenderCredentials
from smartsender_mailer.application.email import DispatchRequest, EmailContent, EmailIdentity
from smartsender_mailer.kernel.errors import SerializationError

__all__ = [
    "CANNOT_ENCODE",
    "ONE_CLICK_UNSUBSCRIBE",
    "build_discard_payload",
    "build_send_payload",
    "build_unsubscribe_headers",
    "encode_payload",
]

CANNOT_ENCODE: Final = "Cannot encode data"
ONE_CLICK_UNSUBSCRIBE: Final = "List-Unsubscribe=One-Click"


def _identity_entry(identity: EmailIdentity) -> dict[str, str]:
    return {"name": identity.display_name, "email": identity.address}


def build_unsubscribe_headers(content: EmailContent) -> dict[str, str]:
    """Return the ``List-Unsubscribe`` headers for *content*.

    The one-click header is only ever added alongside a link; a mailto-only
    unsubscribe never gets it, even when one-click is supported.
    """
    link = content.unsubscribe_link_url
    mail = content.unsubscribe_mail_address
    headers: dict[str, str] = {}
    if link and mail:
        if content.supports_one_click_unsubscribe:
            headers["List-Unsubscribe-Post"] = ONE_CLICK_UNSUBSCRIBE
        headers["List-Unsubscribe"] = f"<{link}>, <{mail}>"
    elif link:
        if content.supports_one_click_unsubscribe:
            headers["List-Unsubscribe-Post"] = ONE_CLICK_UNSUBSCRIBE
        headers["List-Unsubscribe"] = f"<{link}>"
    elif mail:
        headers["List-Unsubscribe"] = f"<{mail}>"
    return headers


def build_send_payload(credentials: SmartSenderCredentials, request: DispatchRequest) -> dict[str, Any]:
    """Translate *request* into the body of a ``/send`` call."""
    if request.recipient is None:
        raise ValueError("request has no recipient")
    content = request.content
    message: dict[str, Any] = {
        "subject": content.subject,
        "to": [_identity_entry(request.recipient)],
        "html": content.html_body,
        "tags": [content.tag],
    }
    if request.sender is not None:
        message["from_email"] = request.sender.address
        message["from_name"] = request.sender.display_name
    if request.reply_to is not None:
        message["reply_to"] = [_identity_entry(request.reply_to)]

    data: dict[str, Any] = {
        "key": credentials.api_key,
        "secret": credentials.api_secret,
        "message": message,
    }

    headers = build_unsubscribe_headers(content)
    if request.reply_to is not None:
        headers["Reply-To"] = request.reply_to.formatted()
    if headers:
        data["headers"] = headers
    return data


def build_discard_payload(recipient: EmailIdentity) -> dict[str, Any]:
    """Body of a blacklist removal call."""
    return {"email": recipient.address}


def encode_payload(payload: dict[str, Any]) -> bytes:
    """JSON-encode *payload*; raises :class:`SerializationError` on failure."""
    try:
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(CANNOT_ENCODE, payload_type="json", cause=exc) from exc
