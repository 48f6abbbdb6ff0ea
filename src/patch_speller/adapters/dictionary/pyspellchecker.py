"""pyspellchecker dictionary adapter.

This module implements the SpellingDictionary protocol on top of the
pyspellchecker word-frequency lists. Lookups are case-insensitive, and
suggestions are ranked by word frequency.

pyspellchecker has no notion of aspell-style suggestion modes, so modes map
to the maximum edit distance explored when generating candidates.
"""

from __future__ import annotations

import structlog
from cachetools import LRUCache
from spellchecker import SpellChecker

from ...utils.errors import DictionaryUnavailableError

log = structlog.get_logger()

# Maximum edit distance per suggestion mode
SUGGESTION_DISTANCES = {
    "ultra": 1,
    "fast": 1,
    "normal": 2,
    "slow": 2,
    "bad-spellers": 2,
}

DEFAULT_CACHE_SIZE = 4096


def language_code(language: str) -> str:
    """Map a locale such as "en_US" or "pt-BR" to a pyspellchecker language code."""
    return language.replace("-", "_").split("_", 1)[0].lower()


def match_case(template: str, word: str) -> str:
    """Give word the capitalization style of template."""
    if template.isupper() and len(template) > 1:
        return word.upper()
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


class PySpellCheckerDictionary:
    """Dictionary adapter implementing the SpellingDictionary protocol.

    Instances are not thread-safe: confine each one to a single runner.

    Example:
        dictionary = PySpellCheckerDictionary("en_US", "fast")
        dictionary.correct("receive")  # True
        dictionary.suggestions("recieve")  # ["receive", ...]
    """

    def __init__(
        self,
        language: str = "en_US",
        suggestion_mode: str = "fast",
        cache_size: int = DEFAULT_CACHE_SIZE,
    ) -> None:
        """Initialize the dictionary.

        Args:
            language: Dictionary locale, e.g. "en_US"
            suggestion_mode: One of SUGGESTION_DISTANCES
            cache_size: Maximum number of memoized lookups

        Raises:
            DictionaryUnavailableError: If the language or mode isn't supported
        """
        distance = SUGGESTION_DISTANCES.get(suggestion_mode.lower())
        if distance is None:
            raise DictionaryUnavailableError(
                f"Unknown suggestion mode: {suggestion_mode}. "
                f"Expected one of: {', '.join(SUGGESTION_DISTANCES)}"
            )

        code = language_code(language)
        try:
            self._checker = SpellChecker(language=code, distance=distance)
        except (ValueError, OSError) as e:
            raise DictionaryUnavailableError(
                f"No dictionary available for language {language}: {e}"
            ) from e

        self.language = language
        self.suggestion_mode = suggestion_mode
        self._correct_cache: LRUCache[str, bool] = LRUCache(maxsize=cache_size)
        self._suggestion_cache: LRUCache[str, list[str]] = LRUCache(maxsize=cache_size)

        log.debug(
            "dictionary_loaded",
            language=language,
            code=code,
            suggestion_mode=suggestion_mode,
            distance=distance,
        )

    def correct(self, word: str) -> bool:
        """Check whether a word is in the dictionary."""
        key = word.lower()
        cached = self._correct_cache.get(key)
        if cached is not None:
            return cached

        result = bool(self._checker.known([key]))
        self._correct_cache[key] = result
        return result

    def suggestions(self, word: str) -> list[str]:
        """Suggest replacements, most frequent first, in the word's capitalization."""
        key = word.lower()
        ranked = self._suggestion_cache.get(key)
        if ranked is None:
            candidates = self._checker.candidates(key) or set()
            frequency = self._checker.word_frequency
            ranked = sorted(
                (c for c in candidates if c != key),
                key=lambda c: (-frequency[c], c),
            )
            self._suggestion_cache[key] = ranked

        return [match_case(word, candidate) for candidate in ranked]
