"""Known identifier catalogs."""

from .python_symbols import PythonSymbolCatalog
from .static import StaticIdentifierCatalog

__all__ = ["PythonSymbolCatalog", "StaticIdentifierCatalog"]
