"""Punctuation-run sentence engines for CJK, Korean and Arabic text."""

import re

from .base import (
    ARABIC_FULL_STOP,
    ARABIC_QUESTION_MARK,
    CJK_TERMINATORS,
    CLOSERS,
    LATIN_TERMINATORS,
    Script,
    SentenceEngine,
)

_CLOSERS = f"[{re.escape(CLOSERS)}]*"


class CJKSentenceEngine(SentenceEngine):
    """Chinese/Japanese: split after runs of full-width terminators."""

    script = Script.CJK

    def __init__(self):
        self.split_pattern = re.compile(f"[{CJK_TERMINATORS}]+{_CLOSERS}")

    def split(self, text: str) -> list[str]:
        return self.split_at(text, self.split_pattern)


class KoreanSentenceEngine(SentenceEngine):
    """Korean: split after Latin-style terminators that are followed by whitespace."""

    script = Script.KOREAN

    def __init__(self):
        self.split_pattern = re.compile(
            f"[{re.escape(LATIN_TERMINATORS)}]+{_CLOSERS}(?=\\s)"
        )

    def split(self, text: str) -> list[str]:
        return self.split_at(text, self.split_pattern)


class ArabicSentenceEngine(SentenceEngine):
    """Arabic: split after the Arabic question mark and standard terminators."""

    script = Script.ARABIC

    def __init__(self):
        terminators = re.escape(LATIN_TERMINATORS) + ARABIC_QUESTION_MARK + ARABIC_FULL_STOP
        self.split_pattern = re.compile(f"[{terminators}]+{_CLOSERS}")

    def split(self, text: str) -> list[str]:
        return self.split_at(text, self.split_pattern)
