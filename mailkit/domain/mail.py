"""
Provider-agnostic mail value types.

These shapes are built by the caller (or by a template mailer) right before
a send and thrown away afterwards. Nothing here is persisted and nothing
here validates addresses: that is left to the provider.
"""

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Protocol, TypeAlias

JSONValue: TypeAlias = (
    str | int | float | bool | None | list["JSONValue"] | dict[str, "JSONValue"]
)


class ProviderOptions(Protocol):
    """
    Provider-specific extras attached to a message.

    Each provider ships its own implementation. The adapter asks the options
    for their wire fields instead of inspecting arbitrary objects.
    """

    def to_wire(self) -> dict[str, Any]:
        """
        Return the fields to merge into the provider's message object.

        Fields that are unset must be left out of the returned mapping.
        """
        ...


@dataclass(frozen=True)
class Address:
    """An email/name combination."""

    name: str
    email: str


@dataclass
class Attachment:
    """
    A file to attach to a message.

    content is read once, during serialization, and closed afterwards.
    The caller owns it until then.
    """

    mime_type: str
    name: str
    content: BinaryIO


@dataclass
class MailConfig:
    """The configurable, non-body part of an email."""

    from_: Address | None = None
    to: list[Address] = field(default_factory=list)
    subject: str = ""
    headers: dict[str, JSONValue] = field(default_factory=dict)
    options: ProviderOptions | None = None


@dataclass
class Message:
    """A fully resolved email, ready to hand to a Mailer."""

    from_: Address | None = None
    to: list[Address] = field(default_factory=list)
    subject: str = ""
    headers: dict[str, JSONValue] = field(default_factory=dict)
    html: str = ""
    text: str = ""
    options: ProviderOptions | None = None

    @classmethod
    def from_config(cls, config: MailConfig, html: str = "", text: str = "") -> "Message":
        """
        Build a message from a config plus rendered bodies.

        Args:
            config: Sender, recipients, subject, headers and options
            html: HTML body
            text: Plain text body

        Returns:
            A new Message. The recipient list and headers are copied so the
            config can be reused for later sends.
        """
        return cls(
            from_=config.from_,
            to=list(config.to),
            subject=config.subject,
            headers=dict(config.headers),
            html=html,
            text=text,
            options=config.options,
        )


@dataclass
class TemplateRequest:
    """One render job: the data plus the names of the text and HTML templates."""

    data: dict[str, Any] = field(default_factory=dict)
    text_template: str = ""
    html_template: str = ""
