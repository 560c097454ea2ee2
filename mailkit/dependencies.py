"""
Mailer wiring.

Builds the production mailers from settings. This is the one place that
knows which adapters back the Mailer and TemplateMailer ports.

Decision: each factory is cached with lru_cache so an application shares one
HTTP connection pool and one compiled template set. Tests call
cache_clear() or build the adapters directly.
"""

import logging
from functools import lru_cache

from mailkit.application.mailer import Mailer, TemplateMailer
from mailkit.config.settings import settings
from mailkit.domain.mail import Address, MailConfig
from mailkit.infrastructure.http.httpx_client import HttpxClient
from mailkit.infrastructure.mandrill.mailer import MandrillMailer
from mailkit.infrastructure.templating.jinja_template_mailer import JinjaTemplateMailer

logger = logging.getLogger(__name__)


@lru_cache
def get_http_client() -> HttpxClient:
    """Get the shared HTTP transport (singleton)."""
    return HttpxClient(timeout=settings.http_timeout)


@lru_cache
def get_mailer() -> Mailer:
    """
    Get the Mandrill mailer (singleton).

    Raises:
        ConfigError: If the configured base URL is invalid
    """
    logger.info(f"Creating Mandrill mailer for {settings.mandrill_base_url}")
    return MandrillMailer(
        base_url=settings.mandrill_base_url,
        api_key=settings.mandrill_api_key,
        http_client=get_http_client(),
    )


@lru_cache
def get_template_mailer() -> TemplateMailer:
    """
    Get the template mailer wrapping get_mailer() (singleton).

    Raises:
        TemplateLoadError: If the configured template glob matches nothing
    """
    return JinjaTemplateMailer(get_mailer(), settings.template_glob)


def default_config(to: list[Address], subject: str) -> MailConfig:
    """Build a MailConfig sent from the configured default sender."""
    return MailConfig(
        from_=Address(name=settings.default_from_name, email=settings.default_from_email),
        to=to,
        subject=subject,
    )
