"""Misspelling classification against a dictionary service."""

from __future__ import annotations

import re

import structlog

from patch_speller.core.filters import FilterChain
from patch_speller.interfaces.dictionary import SpellingDictionary
from patch_speller.utils.metrics import SpellMetrics

log = structlog.get_logger()

SINGULAR_SUFFIX_PATTERN = re.compile(r"(e?s|\d+)$")


def singularize(word: str) -> str:
    """Strip one trailing "es", "s" or digit run.

    This is a heuristic, not a linguistic rule: irregular plurals
    ("children", "mice") are left alone, and words that merely end in
    "s" ("class") lose it as well.

    Args:
        word: Word to normalize

    Returns:
        The word without its plural or numeric suffix
    """
    return SINGULAR_SUFFIX_PATTERN.sub("", word, count=1)


class SpellClassifier:
    """Decides whether a candidate word is misspelled.

    A word is misspelled only if it passes the filter chain and the
    dictionary rejects both the word and its singularized form.

    Example:
        classifier = SpellClassifier(dictionary, FilterChain(config, catalog))
        flagged = [w for w in extract_words(line) if classifier.is_misspelled(w)]
    """

    def __init__(
        self,
        dictionary: SpellingDictionary,
        filters: FilterChain,
        metrics: SpellMetrics | None = None,
    ) -> None:
        """Initialize the SpellClassifier.

        Args:
            dictionary: Dictionary service for the run's language
            filters: Word filters applied before any lookup
            metrics: Optional counters to update
        """
        self._dictionary = dictionary
        self._filters = filters
        self._metrics = metrics or SpellMetrics()

    def _lookup(self, word: str) -> bool:
        self._metrics.dictionary_lookups.inc()
        return self._dictionary.correct(word)

    def is_misspelled(self, word: str) -> bool:
        """Classify a word.

        Args:
            word: Candidate sub-word

        Returns:
            True if the word should be reported
        """
        if not self._filters.is_lintable_word(word):
            return False

        self._metrics.words_checked.inc()

        if self._lookup(word):
            return False

        singular = singularize(word)
        if singular != word and singular and self._lookup(singular):
            log.debug("accepted_as_plural", word=word, singular=singular)
            return False

        return True
