"""
Mandrill-specific message options.

Field names and order follow the Mandrill messages/send API documentation.
Unset values (False, "", empty collections, None) are left out of the wire
payload entirely, except merge variable content, which is only left out
when None.
"""

import base64
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_serializer,
)

from mailkit.domain.mail import Attachment


def _is_empty(value: Any) -> bool:
    return value is None or value is False or (
        isinstance(value, str | list | dict) and len(value) == 0
    )


class WireModel(BaseModel):
    """
    Base model that drops empty fields when dumped.

    Fields listed in keep_falsy are only dropped when None, so False, 0
    and "" still reach the wire.
    """

    model_config = ConfigDict(extra="forbid")

    keep_falsy: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: Any) -> dict[str, Any]:
        return {
            key: value
            for key, value in handler(self).items()
            if value is not None and (key in self.keep_falsy or not _is_empty(value))
        }


class MergeVar(WireModel):
    """A single merge variable. content is sent whenever it is not None."""

    keep_falsy: ClassVar[frozenset[str]] = frozenset({"content"})

    name: str = ""
    content: Any = None


class MergeVars(WireModel):
    """Merge variables for one recipient."""

    rcpt: str = ""
    vars: list[MergeVar] = Field(default_factory=list)


class RecipientMetadata(WireModel):
    """Metadata attached to one recipient."""

    rcpt: str = ""
    values: dict[str, Any] = Field(default_factory=dict)


def _encode_attachment(attachment: Attachment) -> dict[str, str]:
    """Read, close and base64-encode an attachment stream."""
    try:
        content = attachment.content.read()
    finally:
        attachment.content.close()

    wire = {
        "type": attachment.mime_type,
        "name": attachment.name,
        "content": base64.b64encode(content).decode("ascii"),
    }
    return {key: value for key, value in wire.items() if value}


class MandrillOptions(WireModel):
    """
    Optional Mandrill features for one message.

    Implements the ProviderOptions protocol: to_wire() returns the fields
    that MandrillMailer merges into the message object, ahead of the
    generic fields.

    Attachments and images are streams. They are consumed the first time
    the options are serialized, so an options instance carrying them can
    only be sent once.
    """

    important: bool = False
    track_opens: bool = False
    track_clicks: bool = False
    auto_text: bool = False
    auto_html: bool = False
    inline_css: bool = False
    url_strip_qs: bool = False
    preserve_recipients: bool = False
    view_content_link: bool = False
    bcc_address: str = ""
    tracking_domain: str = ""
    signing_domain: str = ""
    return_path_domain: str = ""
    merge: bool = False
    merge_language: str = ""
    global_merge_vars: list[MergeVar] = Field(default_factory=list)
    merge_vars: list[MergeVars] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    subaccount: str = ""
    google_analytics_domains: list[str] = Field(default_factory=list)
    google_analytics_campaign: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
    recipient_metadata: RecipientMetadata | None = None
    attachments: list[Any] = Field(default_factory=list)
    images: list[Any] = Field(default_factory=list)

    @field_validator("attachments", "images")
    @classmethod
    def check_attachments(cls, value: list[Any]) -> list[Any]:
        for item in value:
            if not isinstance(item, Attachment):
                raise ValueError(f"expected Attachment, got {type(item).__name__}")
        return value

    @field_serializer("attachments", "images")
    def serialize_attachments(self, value: list[Attachment]) -> list[dict[str, str]]:
        return [_encode_attachment(attachment) for attachment in value]

    def to_wire(self) -> dict[str, Any]:
        """Return the non-empty option fields in documented order."""
        return self.model_dump(mode="json")
