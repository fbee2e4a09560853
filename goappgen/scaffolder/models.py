"""Data models shared by the scaffolder components.

``ProjectConfig`` is what the CLI hands over; ``TemplateData`` is derived from
it once per generation run and is the only thing templates and path
placeholders ever see.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from goappgen.config import DEFAULT_GO_VERSION

from .naming import lower, pluralize, title_case


# ---------------------------------------------------------------------------
# Input configuration
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(..., min_length=1, description="Project directory and binary name")
    module_name: str = Field(..., min_length=1, description="Go module path")
    domain: str = Field(..., min_length=1, description="Primary domain entity, e.g. 'order'")
    description: str = Field(default="", description="Short project description")
    author: str = Field(default="Developer")
    features: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Opaque feature tokens; order and duplicates are irrelevant",
    )

    @field_validator("app_name")
    @classmethod
    def _app_name_is_single_segment(cls, value: str) -> str:
        if not _is_single_segment(value):
            raise ValueError(f"app name must be a single path segment, got {value!r}")
        return value

    @field_validator("domain")
    @classmethod
    def _domain_is_single_word(cls, value: str) -> str:
        if any(ch.isspace() for ch in value):
            raise ValueError(f"domain must be a single word, got {value!r}")
        if not _is_single_segment(value):
            raise ValueError(f"domain must be a single path segment, got {value!r}")
        return value


def _is_single_segment(value: str) -> bool:
    return value not in (".", "..") and "/" not in value and "\\" not in value


# ---------------------------------------------------------------------------
# Capability set
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FeatureSet:
    """Immutable, case-sensitive set of feature tokens."""

    tokens: frozenset[str] = frozenset()

    @classmethod
    def of(cls, features: Iterable[str]) -> "FeatureSet":
        return cls(frozenset(features))

    def contains(self, name: str) -> bool:
        if not isinstance(name, str):
            raise TypeError(f"feature name must be a string, got {type(name).__name__}")
        return name in self.tokens

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self.tokens

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.tokens))

    def __len__(self) -> int:
        return len(self.tokens)


# ---------------------------------------------------------------------------
# Template data
# ---------------------------------------------------------------------------


class TemplateData(BaseModel):
    """Everything a template can reference, derived once per run."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    app_name: str
    module_name: str
    domain: str
    domain_title: str
    domain_plural: str
    domain_plural_lower: str
    domain_lower: str
    description: str
    author: str
    package_import_path: str
    go_version: str = DEFAULT_GO_VERSION
    features: FeatureSet = Field(default_factory=FeatureSet)

    @classmethod
    def from_config(
        cls, config: ProjectConfig, *, go_version: str = DEFAULT_GO_VERSION
    ) -> "TemplateData":
        """Derive the naming variants and capability set from *config*."""
        plural = pluralize(config.domain)
        return cls(
            app_name=config.app_name,
            module_name=config.module_name,
            domain=config.domain,
            domain_title=title_case(config.domain),
            domain_plural=plural,
            domain_plural_lower=lower(plural),
            domain_lower=lower(config.domain),
            description=config.description,
            author=config.author,
            package_import_path=config.module_name,
            go_version=go_version,
            features=FeatureSet.of(config.features),
        )

    def has_feature(self, name: str) -> bool:
        """Return ``True`` if *name* was among the selected features."""
        return self.features.contains(name)

    def as_context(self) -> dict[str, Any]:
        """Return the Jinja2 context: every field plus ``has_feature``."""
        context: dict[str, Any] = {
            name: getattr(self, name) for name in type(self).model_fields
        }
        context["has_feature"] = self.has_feature
        return context
