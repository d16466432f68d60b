"""Utility functions."""

from .ids import new_id, timestamp_id
from .phrases import split_phrases
from .structure import extract, match_prefix, match_suffix, split_lines
from .text_cleaner import clean_text, count_words

__all__ = [
    "new_id",
    "timestamp_id",
    "split_phrases",
    "extract",
    "match_prefix",
    "match_suffix",
    "split_lines",
    "clean_text",
    "count_words",
]
