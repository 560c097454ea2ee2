"""
Jinja2 implementation of the TemplateMailer port.

Renders a plain text and an HTML template against the same data, merges
the result with a MailConfig and hands the message to a wrapped Mailer.
"""

import glob
import logging
from pathlib import Path
from typing import Any

from jinja2 import (
    DictLoader,
    Environment,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from mailkit.application.mailer import Mailer, TemplateMailer
from mailkit.domain.exceptions import RenderError, TemplateLoadError, ValidationError
from mailkit.domain.mail import MailConfig, Message, TemplateRequest

logger = logging.getLogger(__name__)


class JinjaTemplateMailer(TemplateMailer):
    """
    Template mailer backed by Jinja2.

    Every template matching the glob is compiled once, in the constructor.
    Templates are addressed by file name (e.g. "welcome_text.txt").
    The compiled set is never modified afterwards, so concurrent sends
    can share one instance.

    Decision: undefined variables raise instead of rendering a placeholder
    such as "<no value>" or an empty string. This is deliberately strict:
    a missing data key is a RenderError rather than a silently broken email.
    """

    def __init__(self, mailer: Mailer, template_glob: str):
        """
        Initialize the template mailer.

        Args:
            mailer: Mailer that receives the rendered messages
            template_glob: Glob matching the template files, e.g. "templates/*.tmpl"

        Raises:
            TemplateLoadError: If nothing matches or a template does not compile
        """
        self.mailer = mailer
        self.template_glob = template_glob
        self._templates = _compile_templates(template_glob)

        logger.info(
            f"Template mailer initialized with {len(self._templates)} templates "
            f"from {template_glob}"
        )

    @classmethod
    def must(cls, mailer: Mailer, template_glob: str) -> "JinjaTemplateMailer":
        """
        Build a template mailer or abort the process.

        Meant for application startup only.

        Raises:
            SystemExit: If the templates cannot be loaded
        """
        try:
            return cls(mailer, template_glob)
        except TemplateLoadError as e:
            logger.critical(f"Cannot load email templates: {e}")
            raise SystemExit(str(e)) from e

    @property
    def template_names(self) -> list[str]:
        """Names of all compiled templates, sorted."""
        return sorted(self._templates)

    async def send(self, template: TemplateRequest | None, config: MailConfig | None) -> None:
        """
        Render both templates and send the resulting message.

        The text template is rendered first; the HTML template is only
        rendered if that succeeded. Errors from the wrapped mailer are not
        wrapped.

        Args:
            template: Template names and data
            config: Sender, recipients, subject, headers and options

        Raises:
            ValidationError: If config or template is None
            RenderError: If a template is missing or fails to render
        """
        if config is None:
            raise ValidationError("config")
        if template is None:
            raise ValidationError("template")

        text = self.render(template.text_template, template.data)
        html = self.render(template.html_template, template.data)

        await self.mailer.send(Message.from_config(config, html=html, text=text))

    def render(self, name: str, data: dict[str, Any]) -> str:
        """
        Render one named template.

        Raises:
            RenderError: If the template does not exist or rendering fails
        """
        compiled = self._templates.get(name)
        if compiled is None:
            raise RenderError(name, f'no template "{name}"')

        try:
            return compiled.render(data)
        except TemplateError as e:
            raise RenderError(name, f"{name}: {e}") from e


def _compile_templates(template_glob: str) -> dict[str, Template]:
    paths = sorted(glob.glob(template_glob))
    files = [Path(path) for path in paths if Path(path).is_file()]
    if not files:
        raise TemplateLoadError(template_glob, f"pattern matches no files: `{template_glob}`")

    sources: dict[str, str] = {}
    for path in files:
        try:
            sources[path.name] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateLoadError(template_glob, f"cannot read {path}: {e}") from e

    environment = Environment(
        loader=DictLoader(sources),
        autoescape=select_autoescape(enabled_extensions=("html", "htm"), default=False),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )

    templates: dict[str, Template] = {}
    for name in sources:
        try:
            templates[name] = environment.get_template(name)
        except TemplateError as e:
            raise TemplateLoadError(template_glob, f"{name}: {e}") from e
    return templates
