"""Parsing strategies for the three content shapes.

The strategy set is closed: ``ParseMode`` names it and ``run_strategy``
dispatches once per call.
"""

import logging
from enum import Enum

from .config import SegmentationConfig
from .engines import split_sentences
from .models import FormatDirective, PhraseBlock, Segment, SentenceBlock
from .scanner import match_single_pair, scan_pairs
from .utils.ids import IdFactory, new_id
from .utils.phrases import split_phrases
from .utils.structure import extract, split_lines, split_suffix
from .utils.text_cleaner import clean_text

logger = logging.getLogger(__name__)


class ParseMode(str, Enum):
    """Content shapes understood by the engine."""

    MONOLINGUAL = "monolingual"
    BILINGUAL_SENTENCE = "bilingual_sentence"
    BILINGUAL_PHRASE = "bilingual_phrase"


def select_mode(directive: FormatDirective) -> ParseMode:
    """Pick the strategy for a parsed origin."""
    if not directive.secondary:
        return ParseMode.MONOLINGUAL
    if directive.is_phrase_mode:
        return ParseMode.BILINGUAL_PHRASE
    return ParseMode.BILINGUAL_SENTENCE


def parse_monolingual(
    text: str,
    directive: FormatDirective,
    config: SegmentationConfig,
    id_factory: IdFactory = new_id,
) -> list[Segment]:
    """One segment per sentence, line by line.

    The line prefix goes to the first sentence of the line. Sentence
    punctuation stays with the sentence it ends, so only the folded paragraph
    newlines are left for the suffix of the last sentence.
    """
    primary = directive.primary
    segments: list[Segment] = []

    for line in split_lines(text):
        parts = extract(line, config.max_suffix_newlines)
        punct, newlines = split_suffix(parts.suffix)
        body = parts.content + punct

        sentences = [
            clean_text(s, config.strip_footnotes)
            for s in split_sentences(body, primary, config.abbreviation_set)
        ]
        sentences = [s for s in sentences if s]
        if not sentences:
            logger.debug("Skipping line without sentence content: %r", line)
            continue

        last = len(sentences) - 1
        for i, sentence in enumerate(sentences):
            segments.append(
                Segment(
                    id=id_factory(),
                    order=len(segments),
                    content=(
                        parts.prefix if i == 0 else "",
                        SentenceBlock({primary: sentence}),
                        newlines if i == last else "",
                    ),
                )
            )
    return segments


def parse_bilingual_sentences(
    text: str,
    directive: FormatDirective,
    config: SegmentationConfig,
    id_factory: IdFactory = new_id,
) -> list[Segment]:
    """One segment per ``primary {secondary}`` pair, scanned over the whole text."""
    primary, secondary = directive.primary, directive.secondary
    segments: list[Segment] = []

    units = scan_pairs(
        text.replace("\r\n", "\n"),
        config.delimiter_open,
        config.delimiter_close,
        config.max_suffix_newlines,
    )
    for unit in units:
        if not unit.terminated:
            logger.debug("Unterminated delimiter, keeping partial unit: %r", unit)
        primary_text = clean_text(unit.primary, config.strip_footnotes)
        secondary_text = clean_text(unit.secondary, config.strip_footnotes)
        if not primary_text:
            logger.debug("Dropping unit without primary text: %r", unit)
            continue
        segments.append(
            Segment(
                id=id_factory(),
                order=len(segments),
                content=(
                    unit.prefix,
                    SentenceBlock({primary: primary_text, secondary: secondary_text}),
                    unit.suffix,
                ),
            )
        )
    return segments


def parse_bilingual_phrases(
    text: str,
    directive: FormatDirective,
    config: SegmentationConfig,
    id_factory: IdFactory = new_id,
) -> list[Segment]:
    """One segment per line, both halves split into phrases.

    Phrase counts of the two languages are not aligned; a line without a
    delimiter pair keeps its phrases under the primary language only.
    """
    primary, secondary = directive.primary, directive.secondary
    separators = config.phrase_separators
    segments: list[Segment] = []

    for line in split_lines(text):
        parts = extract(line, config.max_suffix_newlines)
        pair = match_single_pair(
            parts.content, config.delimiter_open, config.delimiter_close
        )
        if pair:
            primary_half, secondary_half = pair
        else:
            primary_half, secondary_half = parts.content, ""

        primary_phrases = _clean_phrases(split_phrases(primary_half, separators), config)
        secondary_phrases = _clean_phrases(split_phrases(secondary_half, separators), config)
        if not primary_phrases and not secondary_phrases:
            continue

        segments.append(
            Segment(
                id=id_factory(),
                order=len(segments),
                content=(
                    parts.prefix,
                    PhraseBlock({primary: primary_phrases, secondary: secondary_phrases}),
                    parts.suffix,
                ),
            )
        )
    return segments


def _clean_phrases(phrases: list[str], config: SegmentationConfig) -> tuple[str, ...]:
    cleaned = (clean_text(p, config.strip_footnotes) for p in phrases)
    return tuple(p for p in cleaned if p)


STRATEGIES = {
    ParseMode.MONOLINGUAL: parse_monolingual,
    ParseMode.BILINGUAL_SENTENCE: parse_bilingual_sentences,
    ParseMode.BILINGUAL_PHRASE: parse_bilingual_phrases,
}


def run_strategy(
    mode: ParseMode,
    text: str,
    directive: FormatDirective,
    config: SegmentationConfig,
    id_factory: IdFactory = new_id,
) -> list[Segment]:
    """Run the strategy for ``mode``."""
    return STRATEGIES[mode](text, directive, config, id_factory)
