"""Data models and transfer objects."""

from .finding import CHECKER_SOURCE, Finding, Severity
from .patch import AddedLine, FilePatch

__all__ = [
    # Patch models
    "AddedLine",
    "FilePatch",
    # Finding models
    "CHECKER_SOURCE",
    "Finding",
    "Severity",
]
