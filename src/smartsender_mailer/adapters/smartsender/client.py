"""SmartSender adapter – SmartSenderClient, the remote MailProvider.

Talks to the SmartSender HTTP/JSON API: ``/send`` for delivery (authenticated
by body fields) and ``/v2/blacklist/remove`` for reactivating a suppressed
address (authenticated by the ``access-token`` header). The service cannot
deliver attachments.
"""
from __future__ import annotations

from typing import Any, Final

from smartsender_mailer.adapters.http import HttpxHttpClient
from smartsender_mailer.adapters.smartsender.config import SmartSenderCredentials, SmartSenderSettings
from smartsender_mailer.adapters.smartsender.payload import (
    build_discard_payload,
    build_send_payload,
    encode_payload,
)
from smartsender_mailer.adapters.smartsender.response import DiscardResponse, interpret_send_response
from smartsender_mailer.application.email import (
    MISSING_RECIPIENT,
    DispatchOutcome,
    DispatchRequest,
    EmailIdentity,
)
from smartsender_mailer.kernel.errors import EmailError, InfrastructureError, SerializationError
from smartsender_mailer.observability.logging import get_logger

__all__ = ["SMARTSENDER_SERVICE_ID", "SmartSenderClient"]

SMARTSENDER_SERVICE_ID: Final = 5

_JSON_HEADERS: Final = {"Content-Type": "application/json"}

logger = get_logger(__name__)


class SmartSenderClient:
    """MailProvider backed by the SmartSender API."""

    service_id: int = SMARTSENDER_SERVICE_ID
    supports_attachments: bool = False

    def __init__(
        self,
        credentials: SmartSenderCredentials,
        *,
        send_url: str,
        discard_url: str,
        http: HttpxHttpClient | None = None,
        timeout: float = 10.0,
        **http_kwargs: Any,
    ) -> None:
        self._credentials = credentials
        self._send_url = send_url
        self._discard_url = discard_url
        self._http = http or HttpxHttpClient(timeout=timeout, **http_kwargs)

    @classmethod
    def from_settings(cls, settings: SmartSenderSettings, **http_kwargs: Any) -> "SmartSenderClient":
        return cls(
            settings.credentials,
            send_url=settings.send_url,
            discard_url=settings.discard_url,
            timeout=settings.timeout,
            **http_kwargs,
        )

    async def __aenter__(self) -> "SmartSenderClient":
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._http.__aexit__(*args)

    async def aclose(self) -> None:
        await self._http.aclose()

    def can_use_service(self) -> bool:
        return self._credentials.is_complete()

    async def reactivate(self, recipient: EmailIdentity) -> None:
        """Remove *recipient* from SmartSender's bounce list.

        Raises :class:`EmailError` when the body cannot be encoded, the call
        fails, or the provider answers with a falsy ``result``.
        """
        try:
            body = encode_payload(build_discard_payload(recipient))
            response = await self._http.post(
                self._discard_url,
                content=body,
                headers={**_JSON_HEADERS, "access-token": self._credentials.api_secret},
            )
        except InfrastructureError as exc:
            raise EmailError(exc.message, cause=exc) from exc

        if response.is_success and not response.text.strip():
            return
        decoded = DiscardResponse.decode(response.text)
        if not decoded.result:
            logger.warning(
                "smartsender_reactivation_rejected",
                status_code=response.status_code,
                errors=list(decoded.errors),
            )
            raise EmailError(decoded.first_error, errors=list(decoded.errors))

    async def send(self, request: DispatchRequest) -> DispatchOutcome:
        """POST *request* to ``/send``; every failure comes back as an outcome."""
        if request.recipient is None:
            return DispatchOutcome.failure(MISSING_RECIPIENT)

        try:
            body = encode_payload(build_send_payload(self._credentials, request))
        except SerializationError as exc:
            logger.warning("smartsender_encode_failed", error=repr(exc.cause))
            return DispatchOutcome.failure(exc.message)

        try:
            response = await self._http.post(self._send_url, content=body, headers=_JSON_HEADERS)
        except InfrastructureError as exc:
            return DispatchOutcome.failure(exc.message)

        if response.is_error:
            logger.warning("smartsender_http_error", status_code=response.status_code)
        return interpret_send_response(response.text, response.status_code)
