"""HTTP adapter – async httpx client wrapper."""
from smartsender_mailer.adapters.http.client import (
    CANNOT_CONNECT,
    CANNOT_UNDERSTAND_RESPONSE,
    HttpClient,
    HttpxHttpClient,
)

__all__ = ["CANNOT_CONNECT", "CANNOT_UNDERSTAND_RESPONSE", "HttpClient", "HttpxHttpClient"]
