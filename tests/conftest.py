"""Shared test fixtures for patch-speller."""

from collections.abc import Callable, Iterable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from patch_speller.adapters.catalog import StaticIdentifierCatalog
from patch_speller.config.loader import resolve_filter_config
from patch_speller.config.schema import FilterConfig
from patch_speller.models.patch import AddedLine, FilePatch

# Get the fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
DIFFS_DIR = FIXTURES_DIR / "diffs"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def multi_file_diff() -> str:
    """Load a git diff touching several files."""
    return (DIFFS_DIR / "multi_file.diff").read_text()


@pytest.fixture
def plain_unified_diff() -> str:
    """Load a `diff -u` style diff without git headers."""
    return (DIFFS_DIR / "plain_unified.diff").read_text()


@pytest.fixture
def make_dictionary() -> Callable[..., MagicMock]:
    """Build a spy dictionary.

    Words listed in `misspelled` (case-insensitive) are rejected; every other
    word is accepted. `suggestions` maps lowercased words to suggestion lists.
    """

    def factory(
        misspelled: Iterable[str] = (),
        suggestions: dict[str, list[str]] | None = None,
    ) -> MagicMock:
        rejected = {w.lower() for w in misspelled}
        suggestion_map = suggestions or {}

        dictionary = MagicMock(spec=["correct", "suggestions"])
        dictionary.correct.side_effect = lambda word: word.lower() not in rejected
        dictionary.suggestions.side_effect = lambda word: list(
            suggestion_map.get(word.lower(), [])
        )
        return dictionary

    return factory


@pytest.fixture
def empty_catalog() -> StaticIdentifierCatalog:
    """Catalog with no known identifiers."""
    return StaticIdentifierCatalog()


@pytest.fixture
def default_config() -> FilterConfig:
    """Filter configuration with every default."""
    return resolve_filter_config(None)


@pytest.fixture
def make_patch() -> Callable[..., FilePatch]:
    """Build a FilePatch from line contents, numbering lines from `start`."""

    def factory(path: str, contents: Iterable[str], start: int = 1) -> FilePatch:
        lines = tuple(
            AddedLine(file_path=path, content=content, line_locator=number)
            for number, content in enumerate(contents, start=start)
        )
        return FilePatch(new_file_path=path, lines=lines, old_file_path=path)

    return factory
