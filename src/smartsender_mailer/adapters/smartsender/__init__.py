"""SmartSender adapter – MailProvider and Mailer for the SmartSender API."""
from smartsender_mailer.adapters.smartsender.config import (
    DEFAULT_DISCARD_URL,
    DEFAULT_SEND_URL,
    SmartSenderCredentials,
    SmartSenderSettings,
)
from smartsender_mailer.adapters.smartsender.client import SMARTSENDER_SERVICE_ID, SmartSenderClient
from smartsender_mailer.adapters.smartsender.mailer import SmartSenderMailer

__all__ = [
    "DEFAULT_DISCARD_URL",
    "DEFAULT_SEND_URL",
    "SMARTSENDER_SERVICE_ID",
    "SmartSenderClient",
    "SmartSenderCredentials",
    "SmartSenderMailer",
    "SmartSenderSettings",
]
