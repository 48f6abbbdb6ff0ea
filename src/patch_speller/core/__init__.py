"""Core spell-checking components.

This module exports the main business logic:
- SpellRunner: Runs the pipeline over a set of patches
- FilterChain: File, keyword and word gates
- SpellClassifier: Dictionary-backed misspelling decision
- FindingBuilder: Turns misspelled words into findings
- UnifiedDiffParser: Reads patches from unified diff text
- extract_words / split_identifier: Tokenization
"""

from patch_speller.core.classifier import SpellClassifier, singularize
from patch_speller.core.diff_parser import UnifiedDiffParser
from patch_speller.core.filters import FilterChain
from patch_speller.core.findings import FindingBuilder, format_message
from patch_speller.core.runner import SpellRunner, create_runner
from patch_speller.core.tokenizer import extract_words, split_identifier

__all__ = [
    "FilterChain",
    "FindingBuilder",
    "SpellClassifier",
    "SpellRunner",
    "UnifiedDiffParser",
    "create_runner",
    "extract_words",
    "format_message",
    "singularize",
    "split_identifier",
]
