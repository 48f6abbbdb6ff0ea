"""Abstract interface for known identifier catalogs."""

from typing import Protocol


class IdentifierCatalog(Protocol):
    """A frozen set of identifier names known to the code environment.

    Names in the catalog are code, not prose, and are never spell-checked.
    Catalogs are populated once when a run starts and must not change
    while the run is in progress.
    """

    def contains(self, name: str) -> bool:
        """
        Check whether a name is a known identifier.

        Matching is exact and case-sensitive.

        Args:
            name: Candidate word

        Returns:
            True if the name is a known identifier
        """
        ...
