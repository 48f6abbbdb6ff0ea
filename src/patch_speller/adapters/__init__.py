"""Concrete implementations of collaborator interfaces."""

from .catalog import PythonSymbolCatalog, StaticIdentifierCatalog
from .dictionary import PySpellCheckerDictionary

__all__ = [
    "PySpellCheckerDictionary",
    "PythonSymbolCatalog",
    "StaticIdentifierCatalog",
]
