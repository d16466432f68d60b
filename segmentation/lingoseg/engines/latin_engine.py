"""Abbreviation-aware sentence engine for Latin-derived scripts."""

import re
from typing import Iterable, Optional

from ..config import DEFAULT_ABBREVIATIONS
from .base import CLOSERS, LATIN_TERMINATORS, Script, SentenceEngine

OPENERS = "\"'“‘«([¿¡"
NON_SPACE = re.compile(r"\S")


class LatinSentenceEngine(SentenceEngine):
    """Split on runs of ``.``, ``!`` and ``?`` followed by a capitalized start."""

    script = Script.LATIN

    def __init__(self, abbreviations: Optional[Iterable[str]] = None):
        """Initialize Latin engine.

        Args:
            abbreviations: Words that never end a sentence when followed by a
                period, compared case-insensitively without the period
        """
        if abbreviations is None:
            abbreviations = DEFAULT_ABBREVIATIONS
        self.abbreviations = frozenset(a.lower().rstrip(".") for a in abbreviations)
        self.split_pattern = re.compile(
            f"[{re.escape(LATIN_TERMINATORS)}…]+[{re.escape(CLOSERS)}]*"
        )

    def get_last_word(self, text: str, start: int, end: int) -> str:
        """Return the word ending at ``end``, without opening quotes."""
        begin = end
        while begin > start and not text[begin - 1].isspace():
            begin -= 1
        return text[begin:end].lstrip(OPENERS)

    def is_abbreviation(self, word: str) -> bool:
        return word.lower() in self.abbreviations

    def is_boundary(self, text: str, start: int, match: re.Match) -> bool:
        """Decide whether a terminator run ends a sentence.

        A run is a boundary at the end of the text, or when whitespace and then
        an uppercase letter or opening quote follow, unless it is an ellipsis
        or a lone period after a known abbreviation or a multi-digit number.
        Runs glued to the next character (decimals such as ``3.14``, inner dots
        of ``U.S.``) never split.
        """
        end = match.end()
        if end == len(text):
            return True
        if not text[end].isspace():
            return False

        following = NON_SPACE.search(text, end)
        if following is None:
            return True
        next_char = following.group(0)
        if not (next_char.isupper() or next_char in OPENERS):
            return False

        terminators = match.group(0).rstrip(CLOSERS)
        if self.is_ellipsis(terminators):
            return False
        if terminators == ".":
            word = self.get_last_word(text, start, match.start())
            if word and (self.is_abbreviation(word) or self.is_number(word)):
                return False
        return True

    def is_ellipsis(self, terminators: str) -> bool:
        return set(terminators) == {"…"} or (
            len(terminators) >= 3 and set(terminators) == {"."}
        )

    def is_number(self, word: str) -> bool:
        """Multi-digit numbers such as years or list counts."""
        return len(word) >= 2 and word.isdigit()

    def split(self, text: str) -> list[str]:
        return self.split_at(text, self.split_pattern, self.is_boundary)
