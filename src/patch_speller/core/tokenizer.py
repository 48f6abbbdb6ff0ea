"""Word extraction from added lines.

Lines are scanned for alphanumeric runs. Runs made only of letters are
decomposed into sub-words at camelCase boundaries while keeping embedded
acronyms whole, so "myHTMLTricks" yields "my", "HTML" and "Tricks" rather
than single letters. Runs that mix letters and digits ("utf8", "sha256")
are dropped because they rarely decompose into real words.
"""

from __future__ import annotations

import re
from enum import Enum

WORD_RUN_PATTERN = re.compile(r"[0-9a-zA-Z]+")
LETTERS_ONLY_PATTERN = re.compile(r"[a-zA-Z]+")


class CharClass(Enum):
    """Character classes driving the boundary scan."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    OTHER = "other"


def classify(char: str) -> CharClass:
    """Return the boundary-scan class of a single character."""
    if char.isdigit():
        return CharClass.DIGIT
    if char.isupper():
        return CharClass.UPPER
    if char.islower():
        return CharClass.LOWER
    return CharClass.OTHER


def _boundaries(run: str) -> set[int]:
    """Indexes in run that start a new sub-word."""
    classes = [classify(c) for c in run]
    size = len(run)
    cuts: set[int] = set()

    for i in range(1, size):
        prev, cur = classes[i - 1], classes[i]
        nxt = classes[i + 1] if i + 1 < size else None

        # "myHTML" -> "my" | "HTML", "v2Update" -> "v2" | "Update"
        if prev in (CharClass.LOWER, CharClass.DIGIT) and cur is CharClass.UPPER:
            cuts.add(i)
        # "HTMLTricks" -> "HTML" | "Tricks"
        elif prev is CharClass.UPPER and cur is CharClass.UPPER and nxt is CharClass.LOWER:
            cuts.add(i)

    # A trailing digit run is its own sub-word: "version2" -> "version" | "2"
    i = 1
    while i < size:
        if classes[i] is CharClass.DIGIT and classes[i - 1] is not CharClass.DIGIT:
            end = i
            while end < size and classes[end] is CharClass.DIGIT:
                end += 1
            if run[i - 1] != "-" and (end == size or end in cuts):
                cuts.add(i)
            i = end
        else:
            i += 1

    return cuts


def split_identifier(run: str) -> list[str]:
    """Split a compound identifier into its sub-words.

    Args:
        run: An alphanumeric run such as "parseHTTPResponse2"

    Returns:
        Sub-words in order, case preserved
    """
    if not run:
        return []

    parts: list[str] = []
    start = 0
    for cut in sorted(_boundaries(run)):
        parts.append(run[start:cut])
        start = cut
    parts.append(run[start:])
    return parts


def extract_words(content: str) -> list[str]:
    """Extract candidate words from a line of text.

    Args:
        content: Raw line content

    Returns:
        Sub-words of every letters-only run, deduplicated in order of
        first occurrence
    """
    words: list[str] = []
    for run in WORD_RUN_PATTERN.findall(content):
        if LETTERS_ONLY_PATTERN.fullmatch(run):
            words.extend(split_identifier(run))
    return list(dict.fromkeys(words))
