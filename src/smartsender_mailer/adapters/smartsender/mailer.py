"""SmartSender adapter – SmartSenderMailer, the public send surface."""
from __future__ import annotations

from typing import Any

from smartsender_mailer.adapters.smartsender.client import SmartSenderClient
from smartsender_mailer.adapters.smartsender.config import SmartSenderSettings
from smartsender_mailer.application.email import (
    DispatchOutcome,
    DispatchRequest,
    EmailContent,
    EmailIdentity,
    LocalProcessing,
    dispatch_email,
)

__all__ = ["SmartSenderMailer"]


class SmartSenderMailer:
    """Mailer that sends through SmartSender and keeps local records in step.

    Usage::

        settings = EnvSettingsLoader().load(SmartSenderSettings)
        async with SmartSenderMailer.from_settings(settings, local_processing) as mailer:
            outcome = await mailer.send_email(content, to=EmailIdentity("a@b.com"))
    """

    def __init__(self, client: SmartSenderClient, local_processing: LocalProcessing) -> None:
        self._client = client
        self._local_processing = local_processing

    @classmethod
    def from_settings(
        cls,
        settings: SmartSenderSettings,
        local_processing: LocalProcessing,
        **http_kwargs: Any,
    ) -> "SmartSenderMailer":
        return cls(SmartSenderClient.from_settings(settings, **http_kwargs), local_processing)

    async def __aenter__(self) -> "SmartSenderMailer":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def service_id(self) -> int:
        return self._client.service_id

    def can_use_service(self) -> bool:
        return self._client.can_use_service()

    async def send_email(
        self,
        content: EmailContent,
        to: EmailIdentity | None,
        from_: EmailIdentity | None = None,
        reply_to: EmailIdentity | None = None,
        to_disabled: bool = False,
    ) -> DispatchOutcome:
        request = DispatchRequest(
            content=content,
            recipient=to,
            sender=from_,
            reply_to=reply_to,
            recipient_was_suppressed=to_disabled,
        )
        return await dispatch_email(self._client, self._local_processing, request)
