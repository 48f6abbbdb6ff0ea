"""Exception hierarchy for patch-speller.

Every fatal condition raised by the checker derives from SpellerError so
hosts can catch a single type. Findings are never errors: an empty result
means the change had nothing to report.
"""

from __future__ import annotations


class SpellerError(Exception):
    """Base exception for all patch-speller errors."""


class ConfigError(SpellerError):
    """Spelling configuration is present but malformed.

    Attributes:
        path: Configuration file the error was found in, if known.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class DictionaryUnavailableError(SpellerError):
    """Dictionary service could not be constructed for the requested language."""


class DiffParseError(SpellerError):
    """Unified diff text could not be parsed.

    Attributes:
        line_number: 1-based line of the diff text that failed to parse.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class GitError(SpellerError):
    """A git command failed."""


class GitCommandTimeoutError(GitError):
    """A git command did not finish within its timeout."""
