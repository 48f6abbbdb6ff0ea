"""Spelling dictionary adapters."""

from .pyspellchecker import PySpellCheckerDictionary

__all__ = ["PySpellCheckerDictionary"]
