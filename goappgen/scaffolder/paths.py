"""Map virtual template paths to concrete output paths.

Paths are not run through Jinja2: a fixed set of placeholder tokens is
replaced literally, so resolving a path can never fail.  Tokens that are not
recognised stay in the path unchanged.
"""

from __future__ import annotations

from pathlib import Path

from .models import TemplateData
from .store import TEMPLATE_ROOT

TEMPLATE_SUFFIXES: tuple[str, ...] = (".tmpl", ".j2")

# Substituted in this order.
PATH_TOKENS: tuple[tuple[str, str], ...] = (
    ("{{AppName}}", "app_name"),
    ("{{Domain}}", "domain"),
    ("{{domain}}", "domain_lower"),
    ("{{domain_plural}}", "domain_plural"),
)


class PathResolver:
    """Converts ``templates/...`` virtual paths into project-relative paths."""

    def __init__(
        self,
        root: str = TEMPLATE_ROOT,
        suffixes: tuple[str, ...] = TEMPLATE_SUFFIXES,
    ) -> None:
        self.prefix = root.rstrip("/") + "/"
        self.suffixes = suffixes

    def resolve(self, virtual_path: str, data: TemplateData) -> str:
        """Return the relative output path for *virtual_path*.

        Example::

            resolve("templates/{{AppName}}/{{Domain}}.go.tmpl", data)
            # -> "shop/order.go" for app "shop", domain "order"
        """
        path = virtual_path
        if path.startswith(self.prefix):
            path = path[len(self.prefix):]

        for suffix in self.suffixes:
            if path.endswith(suffix):
                path = path[: -len(suffix)]
                break

        for token, field_name in PATH_TOKENS:
            path = path.replace(token, getattr(data, field_name))

        return path

    def output_path(
        self, virtual_path: str, data: TemplateData, project_root: str | Path
    ) -> Path:
        """Resolve *virtual_path* and join it under *project_root*."""
        return Path(project_root) / self.resolve(virtual_path, data)
