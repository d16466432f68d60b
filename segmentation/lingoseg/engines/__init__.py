"""Sentence engines."""

from typing import Iterable, Optional

from .base import Script, SentenceEngine, detect_script, script_for_language
from .latin_engine import LatinSentenceEngine
from .script_engines import ArabicSentenceEngine, CJKSentenceEngine, KoreanSentenceEngine


def get_engine(
    script: Script, abbreviations: Optional[Iterable[str]] = None
) -> SentenceEngine:
    """Return the sentence engine for a script family."""
    if script == Script.CJK:
        return CJKSentenceEngine()
    if script == Script.KOREAN:
        return KoreanSentenceEngine()
    if script == Script.ARABIC:
        return ArabicSentenceEngine()
    return LatinSentenceEngine(abbreviations)


def split_sentences(
    text: str,
    lang: Optional[str] = None,
    abbreviations: Optional[Iterable[str]] = None,
) -> list[str]:
    """Split text into sentences using the rules of its script.

    Args:
        text: Payload text
        lang: Language hint; the script is detected from the text when omitted
        abbreviations: Override for the Latin abbreviation table

    Returns:
        Ordered, trimmed, non-empty sentences (empty only for blank input)
    """
    if not text or not text.strip():
        return []
    engine = get_engine(script_for_language(lang, text), abbreviations)
    return engine.split(text)


__all__ = [
    "Script",
    "SentenceEngine",
    "LatinSentenceEngine",
    "CJKSentenceEngine",
    "KoreanSentenceEngine",
    "ArabicSentenceEngine",
    "detect_script",
    "script_for_language",
    "get_engine",
    "split_sentences",
]
