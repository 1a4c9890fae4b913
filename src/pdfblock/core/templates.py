"""Jinja2-based HTML templating with escaping enforced by construction.

Every template shares one sandboxed environment with autoescaping turned
on, so any value interpolated into markup is HTML-escaped unless it is
explicitly marked safe with markupsafe.Markup.
"""

from __future__ import annotations

from typing import Any

from jinja2 import StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2.exceptions import SecurityError
from jinja2.sandbox import SandboxedEnvironment


class TemplateError(Exception):
    """Error in template rendering (including sandbox violations)."""


_ENV = SandboxedEnvironment(
    undefined=StrictUndefined,  # Raise on undefined variables
    autoescape=True,
    keep_trailing_newline=False,
)


class HtmlTemplate:
    """Autoescaping HTML template.

    Example:
        template = HtmlTemplate('<a href="{{ href }}">{{ text }}</a>')
        template.render(href='x" onclick="y', text="<b>")
        # '<a href="x&#34; onclick=&#34;y">&lt;b&gt;</a>'
    """

    def __init__(self, template_string: str) -> None:
        """Initialize template.

        Args:
            template_string: Jinja2 template string

        Raises:
            TemplateError: If template syntax is invalid
        """
        self._template_string = template_string
        try:
            self._template = _ENV.from_string(template_string)
        except TemplateSyntaxError as e:
            raise TemplateError(f"Invalid template syntax: {e}") from e

    @property
    def source(self) -> str:
        return self._template_string

    def render(self, **variables: Any) -> str:
        """Render template with variables.

        Raises:
            TemplateError: If rendering fails (undefined variable, sandbox violation, etc.)
        """
        try:
            return self._template.render(**variables)
        except UndefinedError as e:
            raise TemplateError(f"Undefined variable: {e}") from e
        except SecurityError as e:
            raise TemplateError(f"Sandbox violation: {e}") from e
        except Exception as e:
            raise TemplateError(f"Template rendering failed: {e}") from e
