"""Identifier catalog backed by an explicit set of names."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class StaticIdentifierCatalog:
    """Frozen set of identifier names implementing IdentifierCatalog.

    Example:
        catalog = StaticIdentifierCatalog({"HTMLResponse", "getattr"})
        catalog.contains("getattr")  # True
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(names)

    def contains(self, name: str) -> bool:
        """Check whether a name is in the catalog (case-sensitive)."""
        return name in self._names

    @property
    def names(self) -> frozenset[str]:
        """All names in the catalog."""
        return self._names

    def __len__(self) -> int:
        return len(self._names)

    @classmethod
    def from_file(cls, path: Path) -> StaticIdentifierCatalog:
        """Load names from a text file, one per line.

        Blank lines and lines starting with "#" are ignored.
        """
        names = []
        with path.open() as f:
            for line in f:
                name = line.strip()
                if name and not name.startswith("#"):
                    names.append(name)
        return cls(names)
