"""Tests for the identifier catalogs."""

import sys
import types
from pathlib import Path

import pytest

from patch_speller.adapters.catalog import PythonSymbolCatalog, StaticIdentifierCatalog


@pytest.fixture(scope="module")
def symbol_catalog() -> PythonSymbolCatalog:
    """A snapshot taken once for the module."""
    return PythonSymbolCatalog.snapshot()


class TestStaticIdentifierCatalog:
    """Tests for StaticIdentifierCatalog."""

    def test_contains_is_case_sensitive(self) -> None:
        """Test exact-match lookup."""
        catalog = StaticIdentifierCatalog({"HTMLResponse", "getattr"})
        assert catalog.contains("getattr") is True
        assert catalog.contains("Getattr") is False
        assert catalog.contains("HTMLResponse") is True

    def test_empty(self) -> None:
        """Test the empty catalog."""
        catalog = StaticIdentifierCatalog()
        assert len(catalog) == 0
        assert catalog.contains("") is False

    def test_from_file(self, tmp_path: Path) -> None:
        """Test loading names from a file."""
        path = tmp_path / "symbols.txt"
        path.write_text("# project identifiers\nActiveRecord\n\n  has_many  \n#comment\n")

        catalog = StaticIdentifierCatalog.from_file(path)

        assert catalog.names == frozenset({"ActiveRecord", "has_many"})

    def test_from_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises."""
        with pytest.raises(FileNotFoundError):
            StaticIdentifierCatalog.from_file(tmp_path / "missing.txt")


class TestPythonSymbolCatalog:
    """Tests for PythonSymbolCatalog.snapshot."""

    @pytest.mark.parametrize("name", ["lambda", "match", "isinstance", "ValueError"])
    def test_keywords_and_builtins(self, symbol_catalog: PythonSymbolCatalog, name: str) -> None:
        """Test that keywords, soft keywords and builtins are known."""
        assert symbol_catalog.contains(name) is True

    def test_builtin_type_attributes(self, symbol_catalog: PythonSymbolCatalog) -> None:
        """Test that attributes of builtin types are known."""
        assert symbol_catalog.contains("startswith") is True
        assert symbol_catalog.contains("setdefault") is True

    def test_loaded_modules(self, symbol_catalog: PythonSymbolCatalog) -> None:
        """Test that loaded module names and their attributes are known."""
        assert symbol_catalog.contains("collections") is True
        assert symbol_catalog.contains("defaultdict") is True

    def test_unknown_name(self, symbol_catalog: PythonSymbolCatalog) -> None:
        """Test that an arbitrary word is not a known identifier."""
        assert symbol_catalog.contains("recieve") is False

    def test_only_identifiers_kept(self) -> None:
        """Test that non-identifier strings are dropped."""
        catalog = PythonSymbolCatalog.snapshot(["fetch_acount", "not an identifier", "9lives"])
        assert catalog.contains("fetch_acount") is True
        assert catalog.contains("not an identifier") is False
        assert catalog.contains("9lives") is False

    def test_snapshot_is_frozen(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that modules loaded after the snapshot are not seen."""
        catalog = PythonSymbolCatalog.snapshot()

        module = types.ModuleType("late_loaded_modul")
        module.brandnewsymbl = 1
        monkeypatch.setitem(sys.modules, "late_loaded_modul", module)

        assert catalog.contains("brandnewsymbl") is False
        assert PythonSymbolCatalog.snapshot().contains("brandnewsymbl") is True

    def test_dotted_module_names_split(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that each part of a dotted module name is known."""
        monkeypatch.setitem(sys.modules, "vendorpkg.subpkgx", None)

        catalog = PythonSymbolCatalog.snapshot()

        assert catalog.contains("vendorpkg") is True
        assert catalog.contains("subpkgx") is True
