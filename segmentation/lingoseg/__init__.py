"""lingoseg - Segment generated text into ordered monolingual or bilingual units."""

__version__ = "0.1.0"

from .book import parse_book
from .config import BookConfig, Config, OutputConfig, SegmentationConfig
from .exceptions import SegmenterError, ValidationError
from .facade import segment
from .models import (
    BookResult,
    Chapter,
    ChapterStats,
    FormatDirective,
    LanguageBlock,
    PhraseBlock,
    Segment,
    SentenceBlock,
)
from .origin import build_origin, origin_languages, origin_unit, parse_origin, validate_origin
from .pipeline import SegmentationPipeline

__all__ = [
    "segment",
    "parse_book",
    "SegmentationPipeline",
    "Config",
    "SegmentationConfig",
    "BookConfig",
    "OutputConfig",
    "SegmenterError",
    "ValidationError",
    "FormatDirective",
    "LanguageBlock",
    "SentenceBlock",
    "PhraseBlock",
    "Segment",
    "Chapter",
    "ChapterStats",
    "BookResult",
    "parse_origin",
    "validate_origin",
    "build_origin",
    "origin_languages",
    "origin_unit",
]
