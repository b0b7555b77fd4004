"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any, Final

import httpx

from smartsender_mailer.kernel.errors import ConnectionError, ExternalServiceError
from smartsender_mailer.observability.logging import get_logger

CANNOT_CONNECT: Final = "Cannot connect"
CANNOT_UNDERSTAND_RESPONSE: Final = "Cannot understand response"

# Failures that happen before a request reaches the peer.
_CONNECT_ERRORS: Final = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.ProxyError,
    httpx.UnsupportedProtocol,
    httpx.InvalidURL,
)

logger = get_logger(__name__)


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Responses are returned whatever their status code; only the transport
    failing is an error. Connection establishment failures raise
    :class:`ConnectionError`, every other transport failure raises
    :class:`ExternalServiceError`.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except _CONNECT_ERRORS as exc:
            logger.warning("http_connect_failed", method=method, url=url, error=str(exc))
            raise ConnectionError(resource=url, message=CANNOT_CONNECT, cause=exc) from exc
        except httpx.HTTPError as exc:
            logger.warning("http_no_response", method=method, url=url, error=str(exc))
            raise ExternalServiceError(service=url, message=CANNOT_UNDERSTAND_RESPONSE, cause=exc) from exc
        logger.debug("http_response", method=method, url=url, status_code=response.status_code)
        return response


HttpClient = HttpxHttpClient

__all__ = ["CANNOT_CONNECT", "CANNOT_UNDERSTAND_RESPONSE", "HttpClient", "HttpxHttpClient"]
