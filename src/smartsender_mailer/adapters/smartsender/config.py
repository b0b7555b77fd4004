"""SmartSender adapter – settings and credentials."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Final

from smartsender_mailer.config.settings import Settings
from smartsender_mailer.config.validation import InvalidSettingValueError

__all__ = [
    "DEFAULT_DISCARD_URL",
    "DEFAULT_SEND_URL",
    "SmartSenderCredentials",
    "SmartSenderSettings",
]

DEFAULT_SEND_URL: Final = "https://api.sndmart.com/send"
DEFAULT_DISCARD_URL: Final = "https://api.sndmart.com/v2/blacklist/remove"


@dataclasses.dataclass(frozen=True)
class SmartSenderCredentials:
    """API key/secret pair; the secret never shows up in ``repr``."""

    api_key: str = ""
    api_secret: str = dataclasses.field(default="", repr=False)

    def is_complete(self) -> bool:
        return bool(self.api_key) and bool(self.api_secret)


@dataclasses.dataclass
class SmartSenderSettings(Settings):
    """SmartSender configuration, read from ``SMARTSENDER_*`` variables."""

    _prefix: ClassVar[str] = "SMARTSENDER"

    api_key: str = ""
    api_secret: str = dataclasses.field(default="", repr=False)
    send_url: str = DEFAULT_SEND_URL
    discard_url: str = DEFAULT_DISCARD_URL
    timeout: float = 10.0

    def _validate(self) -> None:
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        for name in ("send_url", "discard_url"):
            value = getattr(self, name)
            if not value.startswith(("http://", "https://")):
                raise InvalidSettingValueError(name, value, "must be an http(s) URL")

    @property
    def credentials(self) -> SmartSenderCredentials:
        return SmartSenderCredentials(api_key=self.api_key, api_secret=self.api_secret)
