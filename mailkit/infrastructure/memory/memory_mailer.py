"""
In-memory mailers.

These record what would have been sent instead of talking to a provider.
Useful for local development and for testing code that depends on the
Mailer or TemplateMailer ports, without an API key or network access.

Unlike the test mocks these keep state per instance, so two instances never
see each other's messages.
"""

import logging
import threading

from mailkit.application.mailer import Mailer, TemplateMailer
from mailkit.domain.exceptions import ValidationError
from mailkit.domain.mail import MailConfig, Message, TemplateRequest

logger = logging.getLogger(__name__)


class InMemoryMailer(Mailer):
    """
    Mailer that stores sent messages in a list.

    Set send_error / ping_error to make the next calls fail with that
    exception; the message is not recorded in that case.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._lock = threading.Lock()
        self.send_error: Exception | None = None
        self.ping_error: Exception | None = None
        self.ping_count = 0

    async def send(self, message: Message) -> None:
        if self.send_error is not None:
            raise self.send_error

        with self._lock:
            self._messages.append(message)
        logger.info(f"[MEMORY] Recorded message '{message.subject}'")

    async def ping(self) -> None:
        with self._lock:
            self.ping_count += 1
        if self.ping_error is not None:
            raise self.ping_error

    @property
    def messages(self) -> list[Message]:
        """Copy of all recorded messages, oldest first."""
        with self._lock:
            return list(self._messages)

    def messages_to(self, email: str) -> list[Message]:
        """All recorded messages with email among the recipients."""
        return [
            message
            for message in self.messages
            if any(recipient.email == email for recipient in message.to)
        ]

    def clear(self) -> None:
        with self._lock:
            self._messages = []


class InMemoryTemplateMailer(TemplateMailer):
    """
    TemplateMailer that records (template, config) pairs without rendering.

    Enforces the same required-argument checks as the real template mailer.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[TemplateRequest, MailConfig]] = []
        self.send_error: Exception | None = None

    async def send(self, template: TemplateRequest | None, config: MailConfig | None) -> None:
        if config is None:
            raise ValidationError("config")
        if template is None:
            raise ValidationError("template")
        if self.send_error is not None:
            raise self.send_error

        self.calls.append((template, config))
        logger.info(
            f"[MEMORY] Recorded template send "
            f"({template.text_template}, {template.html_template})"
        )
