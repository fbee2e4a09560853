"""Exceptions raised while scaffolding a project.

Every error carries enough context (template path, output path or step
name) to tell which phase of the generation failed.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all generation failures."""


class TemplateNotFoundError(ScaffoldError):
    """Raised when a virtual path is not present in the template store."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Template not found: {path}")


class TemplateParseError(ScaffoldError):
    """Raised when a template's syntax is malformed."""

    def __init__(self, template: str, message: str, lineno: int | None = None) -> None:
        self.template = template
        self.lineno = lineno
        location = f"{template}:{lineno}" if lineno else template
        super().__init__(f"Failed to parse template {location}: {message}")


class TemplateRenderError(ScaffoldError):
    """Raised when a template references missing data or misuses a helper."""

    def __init__(self, template: str, message: str) -> None:
        self.template = template
        super().__init__(f"Failed to render template {template}: {message}")


class ProjectWriteError(ScaffoldError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: Path, message: str, template: str | None = None) -> None:
        self.path = Path(path)
        self.template = template
        prefix = f"{template} -> " if template else ""
        super().__init__(f"Failed to write {prefix}{self.path}: {message}")


class PostProcessStepError(ScaffoldError):
    """Raised when a fatal post-processing command fails."""

    def __init__(self, step: str, returncode: int, detail: str = "") -> None:
        self.step = step
        self.returncode = returncode
        self.detail = detail
        message = f"Post-processing step '{step}' failed (exit code {returncode})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
