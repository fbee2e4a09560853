"""Tests for virtual-path to output-path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from goappgen.scaffolder.models import ProjectConfig, TemplateData
from goappgen.scaffolder.paths import PathResolver

pytestmark = pytest.mark.unit


@pytest.fixture
def resolver() -> PathResolver:
    return PathResolver()


class TestResolve:
    def test_prefix_suffix_and_tokens(
        self, resolver: PathResolver, shop_data: TemplateData
    ) -> None:
        assert resolver.resolve("templates/{{AppName}}/{{Domain}}.go.tmpl", shop_data) == "shop/order.go"

    def test_j2_suffix_is_stripped(
        self, resolver: PathResolver, task_data: TemplateData
    ) -> None:
        assert resolver.resolve("templates/cmd/root.go.j2", task_data) == "cmd/root.go"

    def test_only_one_suffix_is_stripped(
        self, resolver: PathResolver, task_data: TemplateData
    ) -> None:
        assert resolver.resolve("templates/a.tmpl.j2", task_data) == "a.tmpl"

    def test_file_without_template_suffix_is_kept(
        self, resolver: PathResolver, task_data: TemplateData
    ) -> None:
        assert resolver.resolve("templates/go.sum", task_data) == "go.sum"

    def test_suffix_is_stripped_before_tokens_are_substituted(
        self, resolver: PathResolver
    ) -> None:
        # A domain word that itself ends in ".tmpl" must survive: the suffix
        # is removed from the template path first, then tokens expand.
        data = TemplateData.from_config(
            ProjectConfig(app_name="app", module_name="m", domain="x.tmpl")
        )
        assert resolver.resolve("templates/{{Domain}}", data) == "x.tmpl"

    def test_lowercase_and_plural_tokens(self, resolver: PathResolver) -> None:
        data = TemplateData.from_config(
            ProjectConfig(app_name="app", module_name="m", domain="Category")
        )
        path = "templates/internal/{{domain}}/{{domain_plural}}.sql.j2"
        assert resolver.resolve(path, data) == "internal/category/Categories.sql"

    def test_unknown_tokens_are_left_verbatim(
        self, resolver: PathResolver, task_data: TemplateData
    ) -> None:
        path = "templates/{{Unknown}}/{{ app_name }}/{{domain}}.go.j2"
        assert resolver.resolve(path, task_data) == "{{Unknown}}/{{ app_name }}/task.go"

    def test_repeated_tokens_are_all_replaced(
        self, resolver: PathResolver, task_data: TemplateData
    ) -> None:
        assert resolver.resolve("templates/{{domain}}/{{domain}}_test.go.j2", task_data) == "task/task_test.go"

    def test_path_without_prefix_is_accepted(
        self, resolver: PathResolver, task_data: TemplateData
    ) -> None:
        assert resolver.resolve("Makefile.j2", task_data) == "Makefile"


class TestOutputPath:
    def test_joins_under_project_root(
        self, resolver: PathResolver, task_data: TemplateData, tmp_path: Path
    ) -> None:
        out = resolver.output_path("templates/internal/models/{{domain}}.go.j2", task_data, tmp_path)
        assert out == tmp_path / "internal" / "models" / "task.go"
