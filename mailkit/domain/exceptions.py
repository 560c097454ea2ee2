"""
Mail-specific exceptions.

Every failure raised by mailkit derives from MailError, so callers can
catch the whole family at once or pick out a single condition.
None of these are logged inside the library; they go straight to the caller.
"""


class MailError(Exception):
    """Base exception for all mail errors."""

    pass


class ConfigError(MailError):
    """Raised when a mailer is constructed with invalid input."""

    pass


class SendError(MailError):
    """Base exception for failures on the send path."""

    pass


class HTTPError(SendError):
    """
    Raised when the HTTP exchange with the provider fails.

    status_code is None when the transport itself failed before a
    response was received.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidStatusCodeError(HTTPError):
    """Raised when the provider answers with anything other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"Invalid status code: {status_code}", status_code)


class ConnectivityError(HTTPError):
    """Raised when pinging the provider fails (bad endpoint or credentials)."""

    pass


class PayloadError(HTTPError):
    """Raised when a message cannot be serialized into the wire payload."""

    pass


class TemplateLoadError(ConfigError):
    """Raised when the template set cannot be compiled at construction time."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"template: {reason}")


class RenderError(MailError):
    """Raised when a named template is missing or fails to render."""

    def __init__(self, template_name: str, reason: str):
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"template: {reason}")


class ValidationError(MailError):
    """Raised when a required per-call argument is missing."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"{parameter} parameter is required")
