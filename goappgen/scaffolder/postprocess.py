"""Post-generation toolchain steps.

After the templates are written, a fixed, ordered list of external commands
bootstraps the new Go module.  Each step is either *fatal* (its failure means
the generated project is broken and aborts the run) or *best-effort* (it needs
an optional tool or a live database, so failure only produces a warning).

Steps run strictly one after another inside the project directory: later
steps depend on what earlier ones produced (``go.mod`` before ``go mod
tidy``, sqlc output before ``go build``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from goappgen.utils import (
    console,
    print_hint,
    print_success,
    print_warning,
    run_command,
)

from .errors import PostProcessStepError
from .models import TemplateData

# Exit code reported when a step's executable cannot be started.
COMMAND_NOT_FOUND = 127


# ---------------------------------------------------------------------------
# Step definitions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PostStep:
    """One external command in the post-processing pipeline.

    ``argv`` items may contain ``str.format`` placeholders naming
    ``TemplateData`` fields, e.g. ``"{module_name}"``.
    """

    name: str
    argv: tuple[str, ...]
    fatal: bool
    warning: str = ""
    hints: tuple[str, ...] = ()
    success_message: str = ""

    def command(self, data: TemplateData) -> list[str]:
        context = data.as_context()
        return [part.format(**context) for part in self.argv]


DEFAULT_STEPS: tuple[PostStep, ...] = (
    PostStep(
        name="go mod init",
        argv=("go", "mod", "init", "{module_name}"),
        fatal=True,
    ),
    PostStep(
        name="sqlc generate",
        argv=("sqlc", "generate"),
        fatal=False,
        warning="SQLc generation failed",
        hints=(
            "Consider installing sqlc: go install github.com/sqlc-dev/sqlc/cmd/sqlc@latest",
            "Or run 'make sqlc' in the project directory after setup",
        ),
        success_message="SQLc code generation successful",
    ),
    PostStep(
        name="go mod tidy",
        argv=("go", "mod", "tidy"),
        fatal=True,
    ),
    PostStep(
        name="go fmt",
        argv=("go", "fmt", "./..."),
        fatal=True,
    ),
    PostStep(
        name="goimports",
        argv=("goimports", "-w", "."),
        fatal=False,
        warning="goimports not available or failed",
        hints=(
            "Consider installing goimports: go install golang.org/x/tools/cmd/goimports@latest",
        ),
    ),
    PostStep(
        name="go build",
        argv=("go", "build", "./..."),
        fatal=False,
        warning="Build failed (this is expected if dependencies require database)",
        hints=(
            "Run 'make up' in the project directory to start the database and complete setup",
        ),
        success_message="Build successful",
    ),
)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class StepResult:
    """Outcome of a single post-processing step."""

    step: str
    fatal: bool
    returncode: int
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class PostProcessReport:
    """All step outcomes of one post-processing run, in execution order."""

    results: list[StepResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def steps_run(self) -> list[str]:
        return [r.step for r in self.results]

    @property
    def failed_steps(self) -> list[str]:
        return [r.step for r in self.results if not r.ok]


# ---------------------------------------------------------------------------
# PostProcessor
# ---------------------------------------------------------------------------


class PostProcessor:
    """Runs the post-generation steps inside a project directory.

    Args:
        steps: Ordered step definitions; defaults to ``DEFAULT_STEPS``.
        verbose: Stream command output to the terminal instead of capturing it.
        timeout: Optional per-command timeout in seconds.
    """

    def __init__(
        self,
        steps: tuple[PostStep, ...] = DEFAULT_STEPS,
        *,
        verbose: bool = False,
        timeout: int | None = None,
    ) -> None:
        self.steps = steps
        self.verbose = verbose
        self.timeout = timeout

    async def run(self, project_root: str | Path, data: TemplateData) -> PostProcessReport:
        """Execute every step in order.

        Raises:
            PostProcessStepError: A fatal step failed; later steps are skipped.
        """
        root = Path(project_root)
        report = PostProcessReport()

        console.print("Running post-generation tasks...")

        for step in self.steps:
            result = await self._run_step(step, root, data)
            report.results.append(result)

            if result.ok:
                if step.success_message:
                    print_success(step.success_message)
                continue

            if step.fatal:
                raise PostProcessStepError(step.name, result.returncode, result.detail)

            headline = step.warning or f"{step.name} failed"
            message = f"{headline}: {result.detail or f'exit code {result.returncode}'}"
            report.warnings.append(message)
            print_warning(escape(message))
            for hint in step.hints:
                print_hint(escape(hint))

        print_success("Post-generation tasks completed")
        return report

    async def _run_step(self, step: PostStep, root: Path, data: TemplateData) -> StepResult:
        argv = step.command(data)
        try:
            returncode, stdout, stderr = await run_command(
                argv, cwd=root, timeout=self.timeout, capture=not self.verbose
            )
        except OSError as exc:
            # Missing executable or unusable working directory.
            return StepResult(
                step=step.name,
                fatal=step.fatal,
                returncode=COMMAND_NOT_FOUND,
                detail=f"{argv[0]}: {exc.strerror or exc}",
            )

        detail = ""
        if returncode != 0:
            detail = stderr or stdout
        return StepResult(step=step.name, fatal=step.fatal, returncode=returncode, detail=detail)
