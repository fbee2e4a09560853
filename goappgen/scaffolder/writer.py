"""Render every bundled template into a project directory.

Templates are processed one at a time in store order.  The first failure
stops the run; files already written stay on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .errors import ProjectWriteError
from .models import TemplateData
from .paths import PathResolver
from .store import TemplateStore
from .templates import TemplateRenderer

FILE_MODE = 0o644


class ProjectWriter:
    """Renders a ``TemplateStore`` into a project root."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        resolver: PathResolver | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.resolver = resolver or PathResolver()

    async def write(
        self,
        store: TemplateStore,
        data: TemplateData,
        project_root: str | Path,
    ) -> list[Path]:
        """Render and write every template under *project_root*.

        Returns:
            The written file paths, in store order.

        Raises:
            TemplateNotFoundError, TemplateParseError, TemplateRenderError:
                Propagated unchanged from the store and renderer.
            ProjectWriteError: A directory or file could not be written.
        """
        root = Path(project_root)
        written: list[Path] = []

        for virtual_path in store.list_all():
            source = store.read(virtual_path)
            content = self.renderer.render(virtual_path, source, data)
            output_file = self.resolver.output_path(virtual_path, data, root)

            try:
                await asyncio.to_thread(_write_file, output_file, content)
            except OSError as exc:
                raise ProjectWriteError(
                    output_file, exc.strerror or str(exc), template=virtual_path
                ) from exc

            written.append(output_file)

        return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: bytes) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    path.chmod(FILE_MODE)
