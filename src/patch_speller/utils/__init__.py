"""Utility functions and helpers.

This module provides various utilities for patch-speller:
- errors: Exception hierarchy
- git: Safe git subprocess execution
- logging: Structured logging configuration
- metrics: Run counters
"""

from patch_speller.utils.errors import (
    ConfigError,
    DictionaryUnavailableError,
    DiffParseError,
    GitCommandTimeoutError,
    GitError,
    SpellerError,
)
from patch_speller.utils.git import SafeGit
from patch_speller.utils.logging import (
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    unbind_context,
)
from patch_speller.utils.metrics import Counter, SpellMetrics

__all__ = [
    # Errors
    "ConfigError",
    "DictionaryUnavailableError",
    "DiffParseError",
    "GitCommandTimeoutError",
    "GitError",
    "SpellerError",
    # Git
    "SafeGit",
    # Logging
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_from_settings",
    "configure_logging",
    "unbind_context",
    # Metrics
    "Counter",
    "SpellMetrics",
]
