"""
Mailer interfaces (Ports).

Defines the contracts for sending emails.
The infrastructure layer provides the adapter implementations.
"""

from abc import ABC, abstractmethod

from mailkit.domain.mail import MailConfig, Message, TemplateRequest


class Mailer(ABC):
    """
    Abstract interface for a mail provider.

    This is a "port" in Hexagonal Architecture. Concrete adapters talk to
    one provider each (Mandrill, an in-memory recorder, ...).
    """

    @abstractmethod
    async def send(self, message: Message) -> None:
        """
        Send one email.

        Args:
            message: The fully resolved message

        Raises:
            SendError: If the transport or the provider fails
        """
        pass

    @abstractmethod
    async def ping(self) -> None:
        """
        Check that the provider endpoint and credentials are valid.

        Raises:
            ConnectivityError: If the provider cannot be reached or rejects us
        """
        pass


class TemplateMailer(ABC):
    """Abstract interface for a mailer that renders its bodies from templates."""

    @abstractmethod
    async def send(self, template: TemplateRequest | None, config: MailConfig | None) -> None:
        """
        Render the text and HTML templates and send the result.

        Args:
            template: Template names and the data to render them with
            config: Sender, recipients, subject, headers and options

        Raises:
            ValidationError: If template or config is missing
            RenderError: If either template fails to render
            Whatever the wrapped Mailer raises, unchanged
        """
        pass
