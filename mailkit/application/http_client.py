"""
HTTP transport port.

Provider adapters only need to POST a buffer to a URL and look at the
status code, so this is all they depend on. Tests inject a mock; production
code injects HttpxClient.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HTTPResponse:
    """Status code and raw body of a provider response."""

    status_code: int
    body: bytes = b""


class HTTPClient(Protocol):
    """
    Protocol for the POST operation used by provider adapters.

    Implementations must be safe to share between concurrent sends and must
    release the response before returning.
    """

    async def post(self, url: str, content_type: str, body: bytes) -> HTTPResponse:
        """
        Issue a POST request.

        Args:
            url: Target URL
            content_type: Value of the Content-Type header
            body: Request body

        Returns:
            The response status code and body

        Raises:
            Exception: Any transport failure, passed through to the adapter
        """
        ...
