"""Identifier catalog built from the running Python interpreter."""

from __future__ import annotations

import builtins
import keyword
import sys
from collections.abc import Iterable, Iterator
from types import ModuleType

import structlog

from .static import StaticIdentifierCatalog

log = structlog.get_logger()


def _module_names(modules: Iterable[tuple[str, ModuleType | None]]) -> Iterator[str]:
    for module_name, module in modules:
        yield from module_name.split(".")
        if module is None:
            continue
        try:
            namespace = vars(module)
        except TypeError:
            # Some import hooks register objects without a __dict__
            log.debug("module_namespace_unavailable", module=module_name)
            continue
        yield from (name for name in list(namespace) if isinstance(name, str))


def _builtin_names() -> Iterator[str]:
    for name, value in vars(builtins).items():
        yield name
        if isinstance(value, type):
            yield from dir(value)


class PythonSymbolCatalog(StaticIdentifierCatalog):
    """Names known to the interpreter, captured once.

    The snapshot holds keywords, builtins and their attributes, and the
    names and top-level attributes of every module loaded when the snapshot
    is taken. Modules imported later are not seen.

    Example:
        catalog = PythonSymbolCatalog.snapshot()
        catalog.contains("isinstance")  # True
    """

    @classmethod
    def snapshot(cls, extra_names: Iterable[str] = ()) -> PythonSymbolCatalog:
        """Capture the identifiers currently known to the interpreter.

        Args:
            extra_names: Additional names to include

        Returns:
            Frozen catalog
        """
        names: set[str] = set(keyword.kwlist)
        names.update(keyword.softkwlist)
        names.update(_builtin_names())
        names.update(_module_names(list(sys.modules.items())))
        names.update(extra_names)

        log.debug("symbol_snapshot_taken", names=len(names), modules=len(sys.modules))
        return cls(name for name in names if name.isidentifier())
