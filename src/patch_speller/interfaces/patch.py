"""Abstract interface for the per-file changes handed to the checker."""

from collections.abc import Sequence
from typing import Protocol

from ..models.patch import AddedLine


class Patch(Protocol):
    """One file's change as seen by the spell checker.

    Hosts adapt their own diff representation to this protocol. The
    checker only reads from it.
    """

    @property
    def new_file_path(self) -> str:
        """Path of the file after the change."""
        ...

    @property
    def additions(self) -> int:
        """Number of lines added to the file."""
        ...

    def added_lines(self) -> Sequence[AddedLine]:
        """
        Lines added by the change.

        Returns:
            Added lines in file order
        """
        ...
