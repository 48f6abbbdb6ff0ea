"""Diff-scoped spell checker for identifiers and comments."""

from patch_speller.config import FilterConfig, load_spell_config, resolve_filter_config
from patch_speller.core import SpellRunner, UnifiedDiffParser, create_runner, extract_words
from patch_speller.models import AddedLine, FilePatch, Finding, Severity

__all__ = [
    "AddedLine",
    "FilePatch",
    "FilterConfig",
    "Finding",
    "Severity",
    "SpellRunner",
    "UnifiedDiffParser",
    "create_runner",
    "extract_words",
    "load_spell_config",
    "resolve_filter_config",
]
