"""Base classes and constants for sentence engines."""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional


class Script(str, Enum):
    """Writing-system families with distinct sentence boundary rules."""

    LATIN = "latin"
    CJK = "cjk"
    KOREAN = "korean"
    ARABIC = "arabic"


# Unicode block ranges, checked in this order
CJK_PATTERN = re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")
HANGUL_PATTERN = re.compile(r"[\u1100-\u11ff\u3130-\u318f\uac00-\ud7af]")
ARABIC_PATTERN = re.compile(r"[\u0600-\u06ff\u0750-\u077f]")

LATIN_TERMINATORS = ".!?"
CJK_TERMINATORS = "。！？"
ARABIC_QUESTION_MARK = "\u061f"  # ؟
ARABIC_FULL_STOP = "\u06d4"  # ۔ (Urdu)

# Closing quotes/brackets that stay attached to the sentence they close
CLOSERS = "\"'”’»)]」』）"

# Language codes with a dedicated rule set; anything else uses Latin rules
LANGUAGE_SCRIPTS = {
    "zh": Script.CJK,
    "ja": Script.CJK,
    "ko": Script.KOREAN,
    "ar": Script.ARABIC,
    "fa": Script.ARABIC,
    "ur": Script.ARABIC,
}


def detect_script(text: str) -> Script:
    """Detect the dominant script family of text by Unicode block."""
    if CJK_PATTERN.search(text):
        return Script.CJK
    if HANGUL_PATTERN.search(text):
        return Script.KOREAN
    if ARABIC_PATTERN.search(text):
        return Script.ARABIC
    return Script.LATIN


def script_for_language(lang: Optional[str], text: str = "") -> Script:
    """Resolve the rule set for a language hint, detecting it when absent."""
    if not lang:
        return detect_script(text)
    code = lang.strip().lower().replace("_", "-").split("-")[0]
    return LANGUAGE_SCRIPTS.get(code, Script.LATIN)


class SentenceEngine(ABC):
    """Base class for sentence engines."""

    script: Script

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """Split text into sentences.

        Args:
            text: Payload text

        Returns:
            Ordered, trimmed, non-empty sentences; a single element when no
            boundary is found
        """
        pass

    def split_at(
        self,
        text: str,
        pattern: re.Pattern,
        is_boundary: Optional[Callable[[str, int, re.Match], bool]] = None,
    ) -> list[str]:
        """Cut text after each terminator match accepted by ``is_boundary``.

        Args:
            text: Input text
            pattern: Regex matching a terminator run
            is_boundary: Predicate ``(text, sentence_start, match)``; every
                match is a boundary when omitted

        Returns:
            List of sentences with terminators attached
        """
        text = text.strip()
        if not text:
            return []

        sentences = []
        start = 0
        for match in pattern.finditer(text):
            if is_boundary is not None and not is_boundary(text, start, match):
                continue
            sentence = text[start : match.end()].strip()
            if sentence:
                sentences.append(sentence)
            start = match.end()

        tail = text[start:].strip()
        if tail:
            sentences.append(tail)
        return sentences or [text]
