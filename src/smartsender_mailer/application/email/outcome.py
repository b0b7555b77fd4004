"""Application email – DispatchOutcome, the single return contract of a dispatch."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DispatchOutcome"]


@dataclass(frozen=True)
class DispatchOutcome:
    """Tagged success/failure result of one dispatch.

    On success ``message`` carries the raw provider response (or
    ``"Message sent"`` when the provider returned no body); on failure it is a
    short diagnostic. ``provider_message_id`` is empty when no provider response
    was decoded.
    """

    succeeded: bool
    message: str
    provider_message_id: str = ""

    @classmethod
    def success(cls, message: str, provider_message_id: str = "") -> "DispatchOutcome":
        return cls(succeeded=True, message=message, provider_message_id=provider_message_id)

    @classmethod
    def failure(cls, message: str, provider_message_id: str = "") -> "DispatchOutcome":
        return cls(succeeded=False, message=message, provider_message_id=provider_message_id)

    def is_ok(self) -> bool:
        return self.succeeded

    def is_err(self) -> bool:
        return not self.succeeded

    def __repr__(self) -> str:
        tag = "Ok" if self.succeeded else "Err"
        return f"DispatchOutcome.{tag}(message={self.message!r}, provider_message_id={self.provider_message_id!r})"
