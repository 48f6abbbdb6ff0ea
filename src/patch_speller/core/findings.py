"""Finding construction for misspelled words."""

from __future__ import annotations

from patch_speller.interfaces.dictionary import SpellingDictionary
from patch_speller.models.finding import Finding, Severity
from patch_speller.models.patch import AddedLine

MESSAGE_TEMPLATE = '"{word}" might not be spelled correctly.'
SUGGESTIONS_TEMPLATE = " Spelling suggestions: {suggestions}"


def format_message(word: str, suggestions: list[str] | tuple[str, ...]) -> str:
    """Render the finding message for a word.

    Args:
        word: The misspelled word
        suggestions: Already truncated suggestions

    Returns:
        Message text, with suggestions appended when there are any
    """
    message = MESSAGE_TEMPLATE.format(word=word)
    if suggestions:
        message += SUGGESTIONS_TEMPLATE.format(suggestions=", ".join(suggestions))
    return message


class FindingBuilder:
    """Turns misspelled words into line-anchored findings.

    Example:
        builder = FindingBuilder(dictionary, max_suggestions=3)
        finding = builder.build("recieve", line)
    """

    def __init__(self, dictionary: SpellingDictionary, max_suggestions: int = 3) -> None:
        """Initialize the FindingBuilder.

        Args:
            dictionary: Dictionary service used for suggestions
            max_suggestions: Maximum number of suggestions to include
        """
        if max_suggestions < 0:
            raise ValueError("max_suggestions must not be negative")
        self._dictionary = dictionary
        self._max_suggestions = max_suggestions

    def build(self, word: str, line: AddedLine) -> Finding:
        """Build the finding for a misspelled word on a line.

        Args:
            word: The misspelled word
            line: The added line the word was found on

        Returns:
            Finding with severity INFO
        """
        suggestions = tuple(self._dictionary.suggestions(word)[: self._max_suggestions])

        return Finding(
            file_path=line.file_path,
            line_locator=line.line_locator,
            message=format_message(word, suggestions),
            word=word,
            suggestions=suggestions,
            severity=Severity.INFO,
        )
