"""go-app-gen scaffolder -- renders the bundled Go service templates.

Takes a ``ProjectConfig`` and writes a project directory from the templates
shipped in ``goappgen/scaffolder/templates/``, then bootstraps it with the Go
toolchain (``go mod init``, ``sqlc generate``, ``go mod tidy`` ...).

Quick usage::

    from goappgen.scaffolder import ProjectConfig, ProjectGenerator

    config = ProjectConfig(
        app_name="taskapp",
        module_name="github.com/acme/taskapp",
        domain="task",
    )
    generator = ProjectGenerator("/tmp/output")
    result = await generator.generate(config)
"""

from goappgen.scaffolder.errors import (
    PostProcessStepError,
    ProjectWriteError,
    ScaffoldError,
    TemplateNotFoundError,
    TemplateParseError,
    TemplateRenderError,
)
from goappgen.scaffolder.generator import GenerationResult, ProjectGenerator
from goappgen.scaffolder.models import FeatureSet, ProjectConfig, TemplateData
from goappgen.scaffolder.paths import PathResolver
from goappgen.scaffolder.postprocess import DEFAULT_STEPS, PostProcessor, PostStep
from goappgen.scaffolder.store import TemplateStore, default_store
from goappgen.scaffolder.templates import TemplateRenderer
from goappgen.scaffolder.writer import ProjectWriter

__all__ = [
    "DEFAULT_STEPS",
    "FeatureSet",
    "GenerationResult",
    "PathResolver",
    "PostProcessStepError",
    "PostProcessor",
    "PostStep",
    "ProjectConfig",
    "ProjectGenerator",
    "ProjectWriteError",
    "ProjectWriter",
    "ScaffoldError",
    "TemplateData",
    "TemplateNotFoundError",
    "TemplateParseError",
    "TemplateRenderError",
    "TemplateRenderer",
    "TemplateStore",
    "default_store",
]
