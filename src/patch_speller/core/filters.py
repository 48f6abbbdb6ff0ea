"""Gates deciding what is worth spell-checking.

Three independent gates run from coarse to fine:
- file gate: the patch path must match files_to_lint
- keyword gate: when keywords are configured, the line must match one
- word filters: length bounds, ignored words, known identifiers, whitelist

Only words passing every gate reach the dictionary.
"""

from __future__ import annotations

from patch_speller.config.schema import FilterConfig
from patch_speller.interfaces.catalog import IdentifierCatalog


class FilterChain:
    """Filters candidate words, lines and files against a FilterConfig.

    Example:
        chain = FilterChain(config, catalog)
        if chain.is_lintable_file(path) and chain.line_matches_keywords(line):
            words = [w for w in extract_words(line) if chain.is_lintable_word(w)]
    """

    def __init__(self, config: FilterConfig, catalog: IdentifierCatalog) -> None:
        """Initialize the FilterChain.

        Args:
            config: Resolved filter parameters for the run
            catalog: Known identifiers, snapshotted at run start
        """
        self._config = config
        self._catalog = catalog

    @property
    def config(self) -> FilterConfig:
        """Filter parameters in use."""
        return self._config

    def is_lintable_file(self, path: str) -> bool:
        """Check if a file path matches the files_to_lint pattern."""
        return self._config.file_pattern.search(path) is not None

    def line_matches_keywords(self, content: str) -> bool:
        """Check the keyword gate for a line.

        Returns:
            True if no keywords are configured or the line matches one
        """
        pattern = self._config.keyword_pattern
        if pattern is None:
            return True
        return pattern.search(content) is not None

    def within_length_bounds(self, word: str) -> bool:
        """Check the word length against the configured bounds, inclusive."""
        length = len(word)
        if length < self._config.min_word_length:
            return False
        max_length = self._config.max_word_length
        return max_length is None or length <= max_length

    def is_ignored(self, word: str) -> bool:
        """Check if the word is listed in ignored_words (case-insensitive)."""
        return word.lower() in self._config.ignored_words

    def is_known_identifier(self, word: str) -> bool:
        """Check if the word is a known code identifier (case-sensitive)."""
        return self._catalog.contains(word)

    def is_whitelisted(self, word: str) -> bool:
        """Check if any whitelist pattern matches the word."""
        return any(pattern.search(word) for pattern in self._config.whitelist)

    def is_lintable_word(self, word: str) -> bool:
        """Check if a word should be looked up in the dictionary at all.

        Args:
            word: Candidate sub-word

        Returns:
            True only if the word passes every word filter
        """
        return (
            self.within_length_bounds(word)
            and not self.is_ignored(word)
            and not self.is_known_identifier(word)
            and not self.is_whitelisted(word)
        )
