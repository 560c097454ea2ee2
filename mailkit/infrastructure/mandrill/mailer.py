"""
Mandrill implementation of the Mailer port.

Translates a generic Message into the Mandrill JSON payload and POSTs it to
the Mandrill HTTP API. Only the status code of the response is inspected:
200 is success, anything else is a hard failure.

Endpoints (relative to the configured base URL):
- POST /messages/send.json
- POST /users/ping.json
"""

import json
import logging
from typing import Any
from urllib.parse import urlsplit

from pydantic_core import PydanticSerializationError

from mailkit.application.http_client import HTTPClient
from mailkit.application.mailer import Mailer
from mailkit.domain.exceptions import (
    ConfigError,
    ConnectivityError,
    HTTPError,
    InvalidStatusCodeError,
    PayloadError,
)
from mailkit.domain.mail import Address, Message
from mailkit.infrastructure.http.httpx_client import HttpxClient
from mailkit.infrastructure.mandrill.options import MandrillOptions

logger = logging.getLogger(__name__)

SEND_PATH = "/messages/send.json"
PING_PATH = "/users/ping.json"
CONTENT_TYPE = "application/json"


class MandrillMailer(Mailer):
    """
    Mailer that sends through the Mandrill HTTP API.

    After construction an instance only holds immutable configuration and
    its transport, so it can be shared between concurrent senders.

    Decision: the transport is injected per instance. When none is given,
    the mailer builds its own HttpxClient; there is no shared module-level
    default to patch.
    """

    def __init__(self, base_url: str, api_key: str, http_client: HTTPClient | None = None):
        """
        Initialize the Mandrill mailer.

        Args:
            base_url: API root, e.g. https://mandrillapp.com/api/1.0
            api_key: Mandrill API key
            http_client: Transport to use (defaults to a new HttpxClient)

        Raises:
            ConfigError: If base_url is not an absolute http(s) URL
        """
        self.base_url = _parse_base_url(base_url)
        self.api_key = api_key
        self.http_client: HTTPClient = http_client or HttpxClient()

        self.send_endpoint = self.base_url + SEND_PATH
        self.ping_endpoint = self.base_url + PING_PATH

        logger.info(f"Mandrill mailer initialized for {self.base_url}")

    @classmethod
    def must(
        cls, base_url: str, api_key: str, http_client: HTTPClient | None = None
    ) -> "MandrillMailer":
        """
        Build a mailer or abort the process.

        Meant for application startup only, where a bad configuration should
        stop everything. Library code uses the constructor.

        Raises:
            SystemExit: If the configuration is invalid
        """
        try:
            return cls(base_url, api_key, http_client)
        except ConfigError as e:
            logger.critical(f"Invalid Mandrill configuration: {e}")
            raise SystemExit(str(e)) from e

    async def send(self, message: Message) -> None:
        """
        Send one email through Mandrill.

        Args:
            message: The message to send

        Raises:
            PayloadError: If the message cannot be serialized
            HTTPError: If the transport fails or Mandrill does not answer 200
        """
        payload = {"key": self.api_key, "message": build_message(message)}
        await self._post(self.send_endpoint, payload)
        logger.debug(f"Message '{message.subject}' accepted by Mandrill")

    async def ping(self) -> None:
        """
        Check the endpoint and API key.

        Raises:
            ConnectivityError: If the ping request fails for any reason
        """
        try:
            await self._post(self.ping_endpoint, {"key": self.api_key})
        except HTTPError as e:
            raise ConnectivityError(str(e), e.status_code) from e

    async def _post(self, endpoint: str, payload: dict[str, Any]) -> None:
        body = encode_payload(payload)

        try:
            response = await self.http_client.post(endpoint, CONTENT_TYPE, body)
        except Exception as e:
            raise HTTPError(str(e)) from e

        if response.status_code != 200:
            raise InvalidStatusCodeError(response.status_code)


def _parse_base_url(base_url: str) -> str:
    try:
        parts = urlsplit(base_url)
    except ValueError as e:
        raise ConfigError(f"Invalid base URL '{base_url}': {e}") from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"Invalid base URL '{base_url}'")

    return base_url.rstrip("/")


def build_message(message: Message) -> dict[str, Any]:
    """
    Map a generic Message to the Mandrill message object.

    Option fields come first, then the generic fields. headers is only
    present when non-empty.

    Raises:
        PayloadError: If the options are not Mandrill options or cannot be serialized
    """
    wire: dict[str, Any] = {}

    if message.options is not None:
        # Options meant for another provider are an error, not "no options".
        if not isinstance(message.options, MandrillOptions):
            raise PayloadError(
                f"Unsupported options type for Mandrill: {type(message.options).__name__}"
            )
        try:
            wire.update(message.options.to_wire())
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise PayloadError(f"Cannot serialize message options: {e}") from e

    sender = message.from_
    wire.update(
        {
            "html": message.html,
            "text": message.text,
            "subject": message.subject,
            "from_email": sender.email if sender else "",
            "from_name": sender.name if sender else "",
            "to": [_recipient(address) for address in message.to],
        }
    )
    if message.headers:
        wire["headers"] = message.headers

    return wire


def _recipient(address: Address) -> dict[str, str]:
    # Empty email/name are left out; type is always present.
    recipient = {"email": address.email, "name": address.name}
    return {key: value for key, value in recipient.items() if value} | {"type": "to"}


def encode_payload(payload: dict[str, Any]) -> bytes:
    """
    Serialize a payload as compact JSON followed by a newline.

    Key order is preserved, so identical input always yields identical bytes.

    Raises:
        PayloadError: If the payload contains values JSON cannot represent
    """
    try:
        encoded = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Cannot serialize payload: {e}") from e
    return (encoded + "\n").encode("utf-8")
