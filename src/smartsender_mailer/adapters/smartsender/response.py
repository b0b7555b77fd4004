"""SmartSender adapter – lenient response decoding.

Provider responses are decoded into small dataclasses whose fields all have
defaults: an unparseable body, a non-object body, or missing and unknown keys
never fail decoding.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final

from smartsender_mailer.application.email import DispatchOutcome

__all__ = [
    "MESSAGE_SENT",
    "UNKNOWN_ERROR",
    "DiscardResponse",
    "SendResponse",
    "interpret_send_response",
]

MESSAGE_SENT: Final = "Message sent"
UNKNOWN_ERROR: Final = "Unknown error!"


def _parse_object(body: str) -> dict[str, Any]:
    try:
        parsed = json.loads(body)
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _as_int(value: Any) -> int:
    # bool is an int subclass; True counts as 1
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            value = float(value.strip())
        except (ValueError, OverflowError):
            return 0
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    return 0


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


@dataclass(frozen=True)
class SendResponse:
    """Decoded ``/send`` response: ``{"result": 1, "message_id": "..."}``."""

    result: int = 0
    message_id: str = "0"

    @classmethod
    def decode(cls, body: str) -> "SendResponse":
        data = _parse_object(body)
        message_id = data.get("message_id")
        return cls(
            result=_as_int(data.get("result", 0)),
            message_id="0" if message_id is None else str(message_id),
        )

    @property
    def succeeded(self) -> bool:
        return self.result == 1


@dataclass(frozen=True)
class DiscardResponse:
    """Decoded blacklist removal response: ``{"result": true, "errors": [...]}``."""

    result: bool = False
    errors: tuple[str, ...] = (UNKNOWN_ERROR,)

    @classmethod
    def decode(cls, body: str) -> "DiscardResponse":
        data = _parse_object(body)
        errors = data.get("errors")
        if isinstance(errors, list) and errors:
            decoded_errors = tuple(str(e) for e in errors)
        else:
            decoded_errors = (UNKNOWN_ERROR,)
        return cls(result=_as_bool(data.get("result", 0)), errors=decoded_errors)

    @property
    def first_error(self) -> str:
        return self.errors[0]


def interpret_send_response(body: str, status_code: int = 200) -> DispatchOutcome:
    """Turn a raw ``/send`` response into a :class:`DispatchOutcome`.

    An empty body counts as success only with a 2xx status; otherwise
    ``result`` must equal 1. A non-empty raw body is kept as the outcome
    message either way.
    """
    if not body.strip():
        if 200 <= status_code < 300:
            return DispatchOutcome.success(MESSAGE_SENT)
        return DispatchOutcome.failure(f"HTTP {status_code} with empty response")
    decoded = SendResponse.decode(body)
    return DispatchOutcome(
        succeeded=decoded.succeeded,
        message=body,
        provider_message_id=decoded.message_id,
    )
