"""
Pytest configuration and shared fixtures.

This file provides common fixtures and configuration for all tests.
"""

import os
from pathlib import Path

# Set test environment variables before any mailkit settings are loaded
# Use .setdefault() to respect values already set by the environment
os.environ.setdefault("MAIL_MANDRILL_BASE_URL", "http://foo.bar")
os.environ.setdefault("MAIL_MANDRILL_API_KEY", "foobar")
os.environ.setdefault("MAIL_DEFAULT_FROM_NAME", "Foo")
os.environ.setdefault("MAIL_DEFAULT_FROM_EMAIL", "foo@domain.com")
os.environ.setdefault(
    "MAIL_TEMPLATE_GLOB", str(Path(__file__).parent / "testdata" / "*")
)
os.environ.setdefault("LOG_LEVEL", "ERROR")

import pytest  # noqa: E402

from mailkit.domain.mail import Address, Message  # noqa: E402

TESTDATA = Path(__file__).parent / "testdata"
TEMPLATE_GLOB = str(TESTDATA / "*")


@pytest.fixture
def template_glob() -> str:
    """Glob matching the valid test templates."""
    return TEMPLATE_GLOB


@pytest.fixture
def hello_message() -> Message:
    """The reference message used for byte-exact payload checks."""
    return Message(
        from_=Address(name="Foo", email="foo@domain.com"),
        to=[Address(name="Bar", email="bar@domain.com")],
        subject="Hello",
        text="World",
    )
