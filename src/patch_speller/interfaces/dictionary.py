"""Abstract interface for spelling dictionary integrations."""

from typing import Protocol


class SpellingDictionary(Protocol):
    """Abstract interface for a spelling dictionary.

    This protocol defines the contract that all dictionary adapters
    (pyspellchecker, hunspell bindings, test doubles) must implement.
    Implementations are constructed once per run for a language and
    suggestion mode and are never shared between concurrent runs.
    """

    def correct(self, word: str) -> bool:
        """
        Check whether a word is spelled correctly.

        Args:
            word: Word to look up, case preserved

        Returns:
            True if the dictionary accepts the word
        """
        ...

    def suggestions(self, word: str) -> list[str]:
        """
        Suggest replacements for a word.

        Args:
            word: Word to find replacements for

        Returns:
            Replacement candidates, best first. May be empty.
        """
        ...
