"""Tests for the go-app-gen command-line front-end."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from goappgen import __version__
from goappgen.cli import (
    CreateCancelled,
    build_config,
    build_parser,
    main,
    parse_features,
    prepare_target,
)

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep stray go-app-gen.yaml files and GOAPPGEN_* variables out of the way."""
    for key in list(os.environ):
        if key.startswith("GOAPPGEN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _args(*argv: str) -> argparse.Namespace:
    return build_parser().parse_args(["create", *argv])


class TestParser:
    def test_version_command(self, capsys):
        main(["version"])
        assert __version__ in capsys.readouterr().out

    def test_name_required_without_interactive(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["create"])
        assert exc_info.value.code == 2

    def test_parse_features(self):
        assert parse_features(["auth,metrics", " health ", ""]) == ["auth", "metrics", "health"]
        assert parse_features(None) == []


class TestBuildConfig:
    def test_defaults(self):
        config, output = build_config(_args("myapp"))
        assert config.app_name == "myapp"
        assert config.module_name == "github.com/user/myapp"
        assert config.domain == "item"
        assert config.description == "A item management API"
        assert config.author == "Developer"
        assert output == Path(".")

    def test_explicit_values(self, tmp_path: Path):
        config, output = build_config(
            _args(
                "shop", "-m", "github.com/acme/shop", "-d", "order",
                "--description", "Orders", "--author", "Ada",
                "-o", str(tmp_path), "--features", "auth,health",
            )
        )
        assert config.module_name == "github.com/acme/shop"
        assert config.domain == "order"
        assert config.description == "Orders"
        assert config.author == "Ada"
        assert config.features == ("auth", "health")
        assert output == tmp_path

    def test_interactive_prompts(self, tmp_path: Path):
        answers = ["shop", "github.com/acme/shop", "order", "Orders", "Ada", str(tmp_path)]
        with patch("goappgen.cli.Prompt.ask", side_effect=answers):
            config, output = build_config(_args("--interactive"))
        assert config.app_name == "shop"
        assert config.domain == "order"
        assert config.author == "Ada"
        assert output == tmp_path


class TestPrepareTarget:
    def test_missing_output_dir(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            prepare_target(tmp_path / "missing", "app")

    def test_absent_target_is_fine(self, tmp_path: Path):
        assert prepare_target(tmp_path, "app") == tmp_path / "app"

    def test_empty_target_is_fine(self, tmp_path: Path):
        (tmp_path / "app").mkdir()
        prepare_target(tmp_path, "app")
        assert (tmp_path / "app").is_dir()

    def test_declined_overwrite_cancels(self, tmp_path: Path):
        (tmp_path / "app").mkdir()
        (tmp_path / "app" / "keep.txt").write_text("keep")
        with patch("goappgen.cli.Confirm.ask", return_value=False):
            with pytest.raises(CreateCancelled):
                prepare_target(tmp_path, "app")
        assert (tmp_path / "app" / "keep.txt").exists()

    def test_confirmed_overwrite_removes_directory(self, tmp_path: Path):
        (tmp_path / "app").mkdir()
        (tmp_path / "app" / "old.txt").write_text("old")
        with patch("goappgen.cli.Confirm.ask", return_value=True):
            prepare_target(tmp_path, "app")
        assert not (tmp_path / "app").exists()

    def test_assume_yes_skips_prompt(self, tmp_path: Path):
        (tmp_path / "app").mkdir()
        (tmp_path / "app" / "old.txt").write_text("old")
        with patch("goappgen.cli.Confirm.ask") as confirm:
            prepare_target(tmp_path, "app", assume_yes=True)
        confirm.assert_not_called()
        assert not (tmp_path / "app").exists()


class TestCreate:
    def test_create_renders_project(self, tmp_path: Path, capsys):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        main(["create", "taskapp", "-d", "task", "-o", str(out_dir), "--skip-post-process"])

        root = out_dir / "taskapp"
        assert (root / "main.go").is_file()
        assert (root / "internal" / "models" / "task.go").is_file()
        out = " ".join(capsys.readouterr().out.split())
        assert "Successfully created project 'taskapp'" in out

    def test_create_runs_toolchain(self, tmp_path: Path, fake_toolchain):
        main(["create", "taskapp", "-o", str(tmp_path)])
        assert fake_toolchain.commands()[0] == "go mod init github.com/user/taskapp"

    def test_fatal_failure_exits_1(self, tmp_path: Path, fake_toolchain, capsys):
        fake_toolchain.results["go mod init"] = (1, "", "module exists")
        with pytest.raises(SystemExit) as exc_info:
            main(["create", "taskapp", "-o", str(tmp_path)])
        assert exc_info.value.code == 1
        out = " ".join(capsys.readouterr().out.split())
        assert "go mod init" in out

    def test_missing_output_dir_exits_1(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", "taskapp", "-o", str(tmp_path / "missing")])
        assert exc_info.value.code == 1

    def test_invalid_domain_exits_1(self, tmp_path: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["create", "taskapp", "-d", "two words", "-o", str(tmp_path)])
        assert exc_info.value.code == 1
