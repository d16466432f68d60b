"""Text cleanup applied to segment payloads."""

import re

FOOTNOTE_PATTERN = re.compile(r"\[\d+\]")
MULTI_SPACE = re.compile(r"[ \t]{2,}")


def clean_text(text: str, strip_footnotes: bool = True) -> str:
    """Remove footnote markers like ``[1]`` and collapse runs of spaces.

    Args:
        text: Input text
        strip_footnotes: Whether to drop bracketed numeric footnote markers

    Returns:
        Cleaned, trimmed text
    """
    if not text:
        return ""
    if strip_footnotes:
        text = FOOTNOTE_PATTERN.sub("", text)
    return MULTI_SPACE.sub(" ", text).strip()


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split()) if text else 0
