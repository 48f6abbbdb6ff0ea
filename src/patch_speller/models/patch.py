"""Data models for the added lines of a change."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AddedLine:
    """A single line added by a change."""

    file_path: str
    content: str
    line_locator: Any  # Forwarded untouched into findings


@dataclass(frozen=True)
class FilePatch:
    """The added lines of one file in a change."""

    new_file_path: str
    lines: tuple[AddedLine, ...] = ()
    old_file_path: str | None = None  # None for newly created files

    @property
    def additions(self) -> int:
        """Number of lines added to the file."""
        return len(self.lines)

    @property
    def is_new_file(self) -> bool:
        """Check if the patch creates the file."""
        return self.old_file_path is None

    def added_lines(self) -> tuple[AddedLine, ...]:
        """Added lines in file order."""
        return self.lines
