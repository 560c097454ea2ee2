"""
Unit tests for the mail value types and exceptions.
"""

import dataclasses

import pytest

from mailkit.domain.exceptions import (
    ConfigError,
    ConnectivityError,
    HTTPError,
    InvalidStatusCodeError,
    MailError,
    PayloadError,
    RenderError,
    SendError,
    TemplateLoadError,
    ValidationError,
)
from mailkit.domain.mail import Address, MailConfig, Message


class TestAddress:
    """Test the Address value object."""

    def test_equality_by_value(self) -> None:
        """Test that addresses with the same fields are equal."""
        assert Address("Foo", "foo@domain.com") == Address("Foo", "foo@domain.com")

    def test_is_immutable(self) -> None:
        """Test that an address cannot be changed after construction."""
        address = Address("Foo", "foo@domain.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            address.email = "bar@domain.com"  # type: ignore[misc]


class TestMessageFromConfig:
    """Test merging a config with rendered bodies."""

    def test_copies_config_fields(self) -> None:
        """Test that every config field ends up on the message."""
        options = object()
        config = MailConfig(
            from_=Address("Foo", "foo@domain.com"),
            to=[Address("Bar", "bar@domain.com")],
            subject="Hello",
            headers={"X-Tag": "a"},
            options=options,  # type: ignore[arg-type]
        )

        message = Message.from_config(config, html="<p>Hi</p>", text="Hi")

        assert message.from_ == Address("Foo", "foo@domain.com")
        assert message.to == [Address("Bar", "bar@domain.com")]
        assert message.subject == "Hello"
        assert message.headers == {"X-Tag": "a"}
        assert message.options is options
        assert message.html == "<p>Hi</p>"
        assert message.text == "Hi"

    def test_config_can_be_reused(self) -> None:
        """Test that changing the message does not change the config."""
        config = MailConfig(to=[Address("Bar", "bar@domain.com")], headers={"X-Tag": "a"})

        message = Message.from_config(config)
        message.to.append(Address("Baz", "baz@domain.com"))
        message.headers["X-Other"] = "b"

        assert config.to == [Address("Bar", "bar@domain.com")]
        assert config.headers == {"X-Tag": "a"}


class TestExceptions:
    """Test the exception hierarchy and messages."""

    def test_hierarchy(self) -> None:
        """Test that every error is a MailError and send errors are HTTPErrors."""
        assert issubclass(HTTPError, SendError)
        assert issubclass(ConnectivityError, HTTPError)
        assert issubclass(PayloadError, HTTPError)
        assert issubclass(TemplateLoadError, ConfigError)
        for error in (ConfigError, SendError, RenderError, ValidationError):
            assert issubclass(error, MailError)

    def test_invalid_status_code_message(self) -> None:
        """Test that the status code is in the message and on the instance."""
        error = InvalidStatusCodeError(503)

        assert str(error) == "Invalid status code: 503"
        assert error.status_code == 503

    def test_validation_error_message(self) -> None:
        """Test the required-parameter message."""
        error = ValidationError("config")

        assert str(error) == "config parameter is required"
        assert error.parameter == "config"
