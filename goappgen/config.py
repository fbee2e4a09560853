"""go-app-gen runtime settings.

Centralised, typed settings for a generation run.  Settings use a Pydantic v2
model so they are validated at construction time and can be serialised
to/from JSON, read from an optional ``go-app-gen.yaml`` file or built from
environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

DEFAULT_GO_VERSION = "1.23"
CONFIG_FILE_NAME = "go-app-gen.yaml"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Tuning knobs for the generator and its post-processing pipeline."""

    output_dir: Path = Field(default=Path("."))
    verbose: bool = Field(default=False, description="Stream toolchain output")
    go_version: str = Field(default=DEFAULT_GO_VERSION, min_length=1)
    command_timeout: int | None = Field(
        default=None, ge=1, description="Per-command timeout in seconds; None waits forever"
    )
    skip_post_process: bool = Field(
        default=False, description="Only render templates, do not run the Go toolchain"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            GOAPPGEN_OUTPUT_DIR, GOAPPGEN_VERBOSE, GOAPPGEN_GO_VERSION,
            GOAPPGEN_COMMAND_TIMEOUT, GOAPPGEN_SKIP_POST_PROCESS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOAPPGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["GOAPPGEN_OUTPUT_DIR"])
        if os.environ.get("GOAPPGEN_VERBOSE"):
            kwargs["verbose"] = os.environ["GOAPPGEN_VERBOSE"].strip().lower() in _TRUTHY
        if os.environ.get("GOAPPGEN_GO_VERSION"):
            kwargs["go_version"] = os.environ["GOAPPGEN_GO_VERSION"]
        if os.environ.get("GOAPPGEN_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["GOAPPGEN_COMMAND_TIMEOUT"])
        if os.environ.get("GOAPPGEN_SKIP_POST_PROCESS"):
            kwargs["skip_post_process"] = (
                os.environ["GOAPPGEN_SKIP_POST_PROCESS"].strip().lower() in _TRUTHY
            )
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file; an empty file yields defaults."""
        try:
            raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: invalid YAML ({exc})") from exc
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        return cls.model_validate(raw)

    @classmethod
    def discover(cls, search_dirs: list[Path] | None = None) -> "Settings":
        """Merge the first ``go-app-gen.yaml`` found with environment overrides.

        Searches the current directory, then ``~/.config``.  Environment
        variables (see :meth:`from_env`) take precedence over the file.
        """
        if search_dirs is None:
            search_dirs = [Path.cwd(), Path.home() / ".config"]

        base = cls()
        for directory in search_dirs:
            candidate = Path(directory) / CONFIG_FILE_NAME
            if candidate.is_file():
                base = cls.from_yaml(candidate)
                break

        overrides = cls.from_env().model_dump(exclude_unset=True)
        return base.model_copy(update=overrides)
