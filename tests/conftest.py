"""Shared pytest fixtures for the go-app-gen test suite.

Provides reusable fixtures for:
- Sample project configurations and derived template data
- Small in-memory template stores
- A recording fake for the Go toolchain commands
- Mock subprocess helpers
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from goappgen.scaffolder.models import ProjectConfig, TemplateData
from goappgen.scaffolder.store import TemplateStore


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def task_config() -> ProjectConfig:
    """The canonical ``taskapp`` / ``task`` configuration."""
    return ProjectConfig(
        app_name="taskapp",
        module_name="github.com/test/taskapp",
        domain="task",
        description="A task management API",
        author="Test Author",
    )


@pytest.fixture
def task_data(task_config: ProjectConfig) -> TemplateData:
    return TemplateData.from_config(task_config)


@pytest.fixture
def shop_data() -> TemplateData:
    """Template data for app ``shop`` managing ``order`` entities."""
    config = ProjectConfig(
        app_name="shop",
        module_name="github.com/acme/shop",
        domain="order",
        features=("auth", "health"),
    )
    return TemplateData.from_config(config)


# ---------------------------------------------------------------------------
# Template stores
# ---------------------------------------------------------------------------

@pytest.fixture
def small_store() -> TemplateStore:
    """A three-template store exercising path tokens and content variables."""
    return TemplateStore(
        {
            "templates/README.md.j2": b"# {{ app_name }}\n\n{{ description }}\n",
            "templates/internal/{{domain}}/model.go.j2": (
                b"package {{ domain_lower }}\n\ntype {{ domain_title }} struct{}\n"
            ),
            "templates/db/{{domain_plural}}.sql.tmpl": (
                b"CREATE TABLE {{ domain_plural_lower }} (id BIGSERIAL);\n"
            ),
        }
    )


# ---------------------------------------------------------------------------
# Toolchain fakes
# ---------------------------------------------------------------------------

class FakeToolchain:
    """Records every command and answers with scripted results.

    ``results`` maps a command prefix (``"go mod init"``, ``"goimports"``)
    to either a ``(returncode, stdout, stderr)`` tuple or an exception to
    raise.  The longest matching prefix wins; unmatched commands succeed.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.cwds: list[Path] = []
        self.captures: list[bool] = []
        self.results: dict[str, Any] = {}

    def commands(self) -> list[str]:
        return [" ".join(argv) for argv in self.calls]

    async def __call__(self, cmd: list[str], cwd: Any = None, timeout: Any = None,
                       capture: bool = True, env: Any = None) -> tuple[int, str, str]:
        self.calls.append(list(cmd))
        self.cwds.append(Path(cwd))
        self.captures.append(capture)
        full = " ".join(cmd)
        matches = [k for k in self.results if full == k or full.startswith(k + " ")]
        outcome = self.results[max(matches, key=len)] if matches else (0, "", "")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_toolchain():
    """Patch the post-processor's ``run_command`` with a ``FakeToolchain``."""
    toolchain = FakeToolchain()
    with patch("goappgen.scaffolder.postprocess.run_command", new=toolchain):
        yield toolchain


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess() -> Callable[..., AsyncMock]:
    """Mock asyncio subprocess for testing command execution.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
