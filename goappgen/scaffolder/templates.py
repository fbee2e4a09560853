"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which renders the raw text of a bundled
template against the run's ``TemplateData``.  Undefined variables are errors
(``StrictUndefined``), so a template referencing data the generator does not
provide fails loudly instead of producing a silently broken file.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from jinja2 import (
    Environment,
    StrictUndefined,
    TemplateError,
    TemplateSyntaxError,
    UndefinedError,
)

from .errors import TemplateParseError, TemplateRenderError
from .models import TemplateData
from .naming import pluralize, title_case


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders template sources with a project's ``TemplateData``.

    The renderer has no loader: the template store owns the bytes, the
    renderer only turns source text into output.  Rendering is side-effect
    free, so the same (source, data) pair always yields identical bytes.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["title_case"] = title_case
        self.env.filters["pluralize"] = pluralize
        self.env.filters["snake_case"] = _snake_case_filter

    def render(
        self,
        name: str,
        source: str | bytes,
        data: TemplateData | Mapping[str, Any],
    ) -> bytes:
        """Render one template and return the UTF-8 encoded output.

        Args:
            name: Template identifier used in error messages (normally the
                virtual path).
            source: Raw template text or bytes.
            data: A ``TemplateData`` or a plain context mapping.

        Raises:
            TemplateParseError: The source is not valid UTF-8 or not valid
                Jinja2 syntax.
            TemplateRenderError: The template references an undefined
                variable or calls ``has_feature`` incorrectly.
        """
        if isinstance(source, bytes):
            try:
                source = source.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise TemplateParseError(name, f"not valid UTF-8 ({exc})") from exc

        try:
            template = self.env.from_string(source)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(name, exc.message or str(exc), exc.lineno) from exc

        context = data.as_context() if isinstance(data, TemplateData) else dict(data)

        try:
            rendered = template.render(**context)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(name, exc.message or str(exc), exc.lineno) from exc
        except (UndefinedError, TypeError) as exc:
            raise TemplateRenderError(name, str(exc)) from exc
        except TemplateError as exc:
            raise TemplateRenderError(name, str(exc)) from exc

        return rendered.encode("utf-8")

    def render_string(self, template_string: str, context: Mapping[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Useful for small fragments that are not stored as templates.
        """
        return self.render("<string>", template_string, context).decode("utf-8")


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _snake_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()
