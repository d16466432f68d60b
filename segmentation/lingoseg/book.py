"""Book-level parsing: title, chapters and reading statistics."""

import logging
import math
from typing import Optional

from .config import BookConfig, SegmentationConfig
from .facade import segment
from .models import (
    BookResult,
    Chapter,
    ChapterStats,
    FormatDirective,
    PhraseBlock,
    Segment,
    SentenceBlock,
)
from .origin import parse_origin
from .scanner import match_single_pair
from .utils.ids import IdFactory, new_id
from .utils.text_cleaner import clean_text, count_words

logger = logging.getLogger(__name__)

TITLE_MARKER = "# "
CHAPTER_MARKER = "## "


def parse_title(
    text: str, directive: FormatDirective, config: SegmentationConfig
) -> SentenceBlock:
    """Parse a heading such as ``Title {Tiêu đề}`` into a language block."""
    if directive.secondary:
        pair = match_single_pair(text, config.delimiter_open, config.delimiter_close)
        if pair:
            return SentenceBlock(
                {
                    directive.primary: clean_text(pair[0], config.strip_footnotes),
                    directive.secondary: clean_text(pair[1], config.strip_footnotes),
                }
            )
    return SentenceBlock({directive.primary: clean_text(text, config.strip_footnotes)})


def count_segment_words(segments: list[Segment], lang: str) -> int:
    """Total words of ``lang`` across sentence and phrase segments."""
    total = 0
    for seg in segments:
        value = seg.block.get(lang)
        if not value:
            continue
        if isinstance(seg.block, PhraseBlock):
            total += sum(count_words(phrase) for phrase in value)
        else:
            total += count_words(value)
    return total


def parse_book(
    markdown: str,
    origin: str,
    config: Optional[SegmentationConfig] = None,
    book_config: Optional[BookConfig] = None,
    id_factory: IdFactory = new_id,
) -> BookResult:
    """Parse book markdown.

    The first level-1 heading is the book title; level-2 headings start
    chapters. Text before the first chapter heading becomes its own chapter,
    and without any chapter headings the whole body is a single chapter.

    Args:
        markdown: Book markdown
        origin: Format descriptor
        config: Engine configuration
        book_config: Title defaults and reading speed
        id_factory: Identifier generator for chapters and segments

    Returns:
        BookResult with chapters in order

    Raises:
        ValidationError: If ``origin`` is blank
    """
    config = config or SegmentationConfig()
    book_config = book_config or BookConfig()
    directive = parse_origin(origin, config.phrase_marker)

    lines = markdown.replace("\r\n", "\n").split("\n")
    title = SentenceBlock({directive.primary: book_config.default_title})
    content_start = 0
    for i, line in enumerate(lines):
        if line.strip().startswith(TITLE_MARKER):
            title = parse_title(line.strip()[len(TITLE_MARKER):], directive, config)
            content_start = i + 1
            break

    # (heading text or None, body lines)
    sections: list[tuple[Optional[str], list[str]]] = [(None, [])]
    for line in lines[content_start:]:
        if line.strip().startswith(CHAPTER_MARKER):
            sections.append((line.strip()[len(CHAPTER_MARKER):], []))
        else:
            sections[-1][1].append(line)

    chapters: list[Chapter] = []
    for heading, body_lines in sections:
        body = "\n".join(body_lines)
        if not body.strip():
            if heading is not None:
                logger.debug("Chapter %r has no content, skipping", heading)
            continue

        segments = segment(body, origin, config, id_factory)
        if heading is None:
            chapter_title = SentenceBlock(
                {directive.primary: book_config.default_chapter_title.format(n=len(chapters) + 1)}
            )
        else:
            chapter_title = parse_title(heading, directive, config)

        total_words = count_segment_words(segments, directive.primary)
        chapters.append(
            Chapter(
                id=id_factory(),
                order=len(chapters),
                title=chapter_title,
                segments=segments,
                stats=ChapterStats(
                    total_segments=len(segments),
                    total_words=total_words,
                    estimated_reading_time=math.ceil(
                        total_words / book_config.words_per_minute
                    ),
                ),
            )
        )

    return BookResult(title=title, chapters=chapters, unit=directive.unit)
