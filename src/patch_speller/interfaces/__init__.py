"""Protocol definitions for pluggable collaborators."""

from .catalog import IdentifierCatalog
from .dictionary import SpellingDictionary
from .patch import Patch

__all__ = ["IdentifierCatalog", "Patch", "SpellingDictionary"]
