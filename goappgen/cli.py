"""Command-line front-end for go-app-gen.

Usage::

    python -m goappgen create myapp
    python -m goappgen create myapp --module github.com/myorg/myapp --domain product
    python -m goappgen create --interactive
"""

from __future__ import annotations

import argparse
import asyncio
import shutil
import sys
from pathlib import Path

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from goappgen import __version__
from goappgen.config import Settings
from goappgen.scaffolder import (
    GenerationResult,
    ProjectConfig,
    ProjectGenerator,
    ScaffoldError,
)
from goappgen.utils import console, is_dir_empty, print_error, print_summary_table

DEFAULT_DOMAIN = "item"
DEFAULT_AUTHOR = "Developer"


class CreateCancelled(Exception):
    """Raised when the user declines to overwrite an existing directory."""


# ---------------------------------------------------------------------------
# Defaults & validation
# ---------------------------------------------------------------------------


def default_module(app_name: str) -> str:
    return f"github.com/user/{app_name}"


def default_description(domain: str) -> str:
    return f"A {domain} management API"


def parse_features(values: list[str] | None) -> list[str]:
    """Flatten ``--features a,b --features c`` into ``["a", "b", "c"]``."""
    features: list[str] = []
    for value in values or []:
        features.extend(item.strip() for item in value.split(",") if item.strip())
    return features


def prepare_target(output_dir: Path, app_name: str, *, assume_yes: bool = False) -> Path:
    """Validate the output location and clear a non-empty target if confirmed.

    Raises:
        FileNotFoundError: *output_dir* does not exist.
        CreateCancelled: The user refused to recreate an existing project.
    """
    if not output_dir.is_dir():
        raise FileNotFoundError(f"output directory does not exist: {output_dir}")

    target = output_dir / app_name
    if target.exists() and not is_dir_empty(target):
        console.print(f"Directory '{escape(str(target))}' already exists and contains files.")
        if not assume_yes and not Confirm.ask("Do you want to recreate it?", default=False):
            raise CreateCancelled("operation cancelled")
        shutil.rmtree(target)
    return target


def build_config(args: argparse.Namespace) -> tuple[ProjectConfig, Path]:
    """Turn parsed arguments (or interactive answers) into a ``ProjectConfig``."""
    if args.interactive:
        console.print("[bold]Welcome to go-app-gen![/bold]")
        console.print("Let's create your Go application step by step.\n")
        app_name = Prompt.ask("Project name", default=args.name or "myapp")
        module = Prompt.ask("Go module name", default=args.module or default_module(app_name))
        domain = Prompt.ask(
            "Primary domain entity (e.g., user, product, order)",
            default=args.domain or DEFAULT_DOMAIN,
        )
        description = Prompt.ask(
            "Project description", default=args.description or default_description(domain)
        )
        author = Prompt.ask("Author name", default=args.author or DEFAULT_AUTHOR)
        output = Prompt.ask("Output directory", default=str(args.output))
    else:
        app_name = args.name
        module = args.module or default_module(app_name)
        domain = args.domain or DEFAULT_DOMAIN
        description = args.description or default_description(domain)
        author = args.author or DEFAULT_AUTHOR
        output = str(args.output)

    config = ProjectConfig(
        app_name=app_name,
        module_name=module,
        domain=domain,
        description=description,
        author=author,
        features=tuple(parse_features(args.features)),
    )
    return config, Path(output)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def run_create(args: argparse.Namespace) -> GenerationResult:
    config, output_dir = build_config(args)
    prepare_target(output_dir, config.app_name, assume_yes=args.yes)

    base = Settings.discover()
    settings = base.model_copy(
        update={
            "output_dir": output_dir,
            "verbose": args.verbose or base.verbose,
            "skip_post_process": args.skip_post_process or base.skip_post_process,
        }
    )
    generator = ProjectGenerator(output_dir, settings=settings)
    result = asyncio.run(generator.generate(config))

    print_summary_table(
        {
            "Project": config.app_name,
            "Location": str(result.project_root),
            "Module": config.module_name,
            "Domain": config.domain,
            "Files": str(len(result.files_written)),
            "Warnings": str(len(result.warnings)),
        },
        title="Project created",
    )
    console.print(f"[bold green]Successfully created project '{config.app_name}'[/bold green]")
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="go-app-gen",
        description="Generate Go applications based on proven architecture patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  go-app-gen create myapp\n"
            "  go-app-gen create myapp --module github.com/myorg/myapp --domain product\n"
            "  go-app-gen create --interactive\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"go-app-gen {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a new Go application")
    create.add_argument("name", nargs="?", help="Project name")
    create.add_argument("-m", "--module", default="", help="Go module name (e.g., github.com/user/project)")
    create.add_argument("-d", "--domain", default="", help="Primary domain entity (e.g., user, product, order)")
    create.add_argument("--description", default="", help="Project description")
    create.add_argument("--author", default="", help="Author name")
    create.add_argument("-o", "--output", type=Path, default=Path("."), help="Output directory")
    create.add_argument(
        "--features", action="append", default=[],
        help="Additional features to include (comma-separated, repeatable)",
    )
    create.add_argument("-i", "--interactive", action="store_true", help="Interactive mode")
    create.add_argument("-v", "--verbose", action="store_true", help="Show toolchain output")
    create.add_argument("-y", "--yes", action="store_true", help="Recreate an existing project without asking")
    create.add_argument(
        "--skip-post-process", action="store_true",
        help="Only render templates; do not run the Go toolchain",
    )

    sub.add_parser("version", help="Display version information")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m goappgen`` and ``go-app-gen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        console.print(f"go-app-gen version {__version__}")
        return

    if not args.interactive and not args.name:
        parser.error("project name is required when not using --interactive")

    try:
        run_create(args)
    except (ScaffoldError, CreateCancelled, FileNotFoundError, ValueError) as exc:
        print_error(escape(f"Failed to create project: {exc}"))
        sys.exit(1)
