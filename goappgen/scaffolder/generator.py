"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and generates a complete Go service under
``<output_dir>/<app_name>``: every bundled template is rendered into the new
directory, then the Go toolchain is run against the result.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from rich.panel import Panel

from goappgen.config import Settings
from goappgen.utils import console

from .errors import ProjectWriteError
from .models import ProjectConfig, TemplateData
from .postprocess import PostProcessor, PostProcessReport
from .store import TemplateStore, default_store
from .writer import ProjectWriter


@dataclass
class GenerationResult:
    """What a successful ``ProjectGenerator.generate`` call produced."""

    project_root: Path
    files_written: list[Path] = field(default_factory=list)
    report: PostProcessReport = field(default_factory=PostProcessReport)

    @property
    def warnings(self) -> list[str]:
        return self.report.warnings


class ProjectGenerator:
    """Scaffolds projects into a fixed output directory.

    Args:
        output_dir: Parent directory; each project lands in a subdirectory
            named after its ``app_name``.
        verbose: Stream toolchain output instead of capturing it.  Overrides
            ``settings.verbose`` when ``True``.
        settings: Runtime settings; defaults to ``Settings()``.
        store: Template store; defaults to the bundled templates.
        writer: Renders templates to disk.
        post_processor: Runs the toolchain steps.
    """

    def __init__(
        self,
        output_dir: str | Path,
        *,
        verbose: bool = False,
        settings: Settings | None = None,
        store: TemplateStore | None = None,
        writer: ProjectWriter | None = None,
        post_processor: PostProcessor | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.settings = settings or Settings(output_dir=self.output_dir)
        self.verbose = verbose or self.settings.verbose
        self.store = store if store is not None else default_store()
        self.writer = writer or ProjectWriter()
        self.post_processor = post_processor or PostProcessor(
            verbose=self.verbose, timeout=self.settings.command_timeout
        )

    # -- Public API --------------------------------------------------------

    async def generate(self, config: ProjectConfig) -> GenerationResult:
        """Generate the complete project.

        Returns:
            A ``GenerationResult``; warnings from best-effort steps are kept
            on ``result.warnings``.

        Raises:
            ScaffoldError: Template read/parse/render or write failures, and
                fatal post-processing steps.  Partial output is left on disk.
        """
        data = self.build_template_data(config)
        project_root = self.output_dir / config.app_name

        try:
            await asyncio.to_thread(project_root.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise ProjectWriteError(
                project_root, f"failed to create project directory: {exc.strerror or exc}"
            ) from exc

        files = await self.writer.write(self.store, data, project_root)
        result = GenerationResult(project_root=project_root, files_written=files)

        if self.settings.skip_post_process:
            return result

        result.report = await self.post_processor.run(project_root, data)
        _print_next_steps(project_root)
        return result

    def build_template_data(self, config: ProjectConfig) -> TemplateData:
        """Derive the per-run ``TemplateData`` for *config*."""
        return TemplateData.from_config(config, go_version=self.settings.go_version)


def _print_next_steps(project_root: Path) -> None:
    lines = [
        f"cd {project_root.name}",
        "make up      # Start the development environment",
        "make help    # See all available commands",
    ]
    console.print(Panel("\n".join(lines), title="Next steps", expand=False))
