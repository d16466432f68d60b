"""Clause-level phrase splitting."""

import re
from functools import lru_cache

DEFAULT_SEPARATORS = ",;—，；、"


@lru_cache(maxsize=16)
def _separator_pattern(separators: str) -> re.Pattern:
    return re.compile(f"[{re.escape(separators)}]")


def split_phrases(text: str, separators: str = DEFAULT_SEPARATORS) -> list[str]:
    """Split text on clause separators.

    Args:
        text: Payload text
        separators: Characters that separate phrases

    Returns:
        Trimmed, non-empty phrases in their original order
    """
    if not text:
        return []
    parts = _separator_pattern(separators).split(text)
    return [part.strip() for part in parts if part.strip()]
