"""
Mail configuration settings.

Centralized configuration using Pydantic Settings for type safety and validation.
Every field can be set through an environment variable prefixed with MAIL_
(e.g. MAIL_MANDRILL_API_KEY) or through a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class MailSettings(BaseSettings):
    """Mail settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # Mandrill
    mandrill_base_url: str = "https://mandrillapp.com/api/1.0"
    mandrill_api_key: str = ""

    # HTTP transport
    http_timeout: float = 10.0

    # Templates
    template_glob: str = "templates/*"

    # Default sender
    default_from_name: str = ""
    default_from_email: str = "noreply@example.com"


# Global settings instance
settings = MailSettings()
