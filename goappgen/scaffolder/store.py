"""Read-only store of the template resources bundled with the package.

Templates ship as package data under ``goappgen/scaffolder/templates/`` and
are addressed by virtual, forward-slash paths rooted at ``templates/``
(e.g. ``templates/internal/{{domain}}/model.go.j2``).  The store is loaded
once and never mutated, so concurrent generation runs can share it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from .errors import TemplateNotFoundError


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TEMPLATE_ROOT = "templates"

_BUNDLED_TEMPLATE_DIR = Path(__file__).parent / TEMPLATE_ROOT


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Immutable mapping of virtual template paths to raw bytes.

    Enumeration order is lexicographic by virtual path so that two runs over
    the same store always visit templates in the same order.
    """

    def __init__(self, resources: Mapping[str, bytes]) -> None:
        self._resources: Mapping[str, bytes] = MappingProxyType(
            {path: bytes(content) for path, content in resources.items()}
        )
        self._order: tuple[str, ...] = tuple(sorted(self._resources))

    @classmethod
    def from_directory(cls, directory: str | Path) -> "TemplateStore":
        """Load every file below *directory* as ``templates/<relative path>``.

        Directories themselves are skipped.  A missing directory yields an
        empty store.
        """
        root = Path(directory)
        if not root.is_dir():
            return cls({})

        resources: dict[str, bytes] = {}
        for file_path in root.rglob("*"):
            if not file_path.is_file():
                continue
            rel = file_path.relative_to(root).as_posix()
            resources[f"{TEMPLATE_ROOT}/{rel}"] = file_path.read_bytes()
        return cls(resources)

    # -- Queries -----------------------------------------------------------

    def list_all(self) -> list[str]:
        """Return every virtual path in stable (sorted) order."""
        return list(self._order)

    def read(self, path: str) -> bytes:
        """Return the raw content of *path*.

        Raises:
            TemplateNotFoundError: If *path* is not in the store.
        """
        try:
            return self._resources[path]
        except KeyError:
            raise TemplateNotFoundError(path) from None

    def __contains__(self, path: object) -> bool:
        return path in self._resources

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"TemplateStore({len(self)} templates)"


@lru_cache(maxsize=1)
def default_store() -> TemplateStore:
    """Return the process-wide store of bundled templates (loaded once)."""
    return TemplateStore.from_directory(_BUNDLED_TEMPLATE_DIR)
