"""Data models for spelling findings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

CHECKER_SOURCE = "patch_speller"


class Severity(Enum):
    """Finding severity.

    The checker is advisory, so only INFO is ever produced. The other
    levels exist for hosts that aggregate findings from several checkers.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Finding:
    """A possibly misspelled word on an added line."""

    file_path: str
    line_locator: Any
    message: str
    word: str
    suggestions: tuple[str, ...] = ()
    severity: Severity = Severity.INFO
    source: str = field(default=CHECKER_SOURCE)

    def to_dict(self) -> dict[str, Any]:
        """Plain representation for JSON output."""
        return {
            "path": self.file_path,
            "line": self.line_locator,
            "level": self.severity.value,
            "message": self.message,
            "word": self.word,
            "suggestions": list(self.suggestions),
            "source": self.source,
        }
