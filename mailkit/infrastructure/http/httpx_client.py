"""
httpx implementation of the HTTPClient port.

One AsyncClient is created per HttpxClient and reused for every request,
which gives connection pooling across sends. httpx.AsyncClient is safe to
share between concurrent tasks.
"""

import logging

import httpx

from mailkit.application.http_client import HTTPResponse

logger = logging.getLogger(__name__)


class HttpxClient:
    """
    HTTP transport backed by httpx.AsyncClient.

    Decision: the timeout lives here, not in the mailers. The mailers impose
    no deadline of their own.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds, ignored when client is given
            client: Preconfigured AsyncClient (e.g. with a MockTransport in tests)
        """
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def post(self, url: str, content_type: str, body: bytes) -> HTTPResponse:
        """POST body to url and return the status code and body."""
        logger.debug(f"POST {url} ({len(body)} bytes)")
        response = await self._client.post(
            url,
            content=body,
            headers={"Content-Type": content_type},
        )
        return HTTPResponse(status_code=response.status_code, body=response.content)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
