"""Tests for the segmentation entry point and its strategies."""

import dataclasses
import logging
import time

import pytest

from lingoseg import segment
from lingoseg.config import SegmentationConfig
from lingoseg.exceptions import ValidationError
from lingoseg.models import PhraseBlock, SentenceBlock
from lingoseg.origin import parse_origin
from lingoseg.strategies import ParseMode, select_mode


def texts(segments, lang):
    return [seg.block[lang] for seg in segments]


class TestSelectMode:
    def test_monolingual(self):
        assert select_mode(parse_origin("en")) == ParseMode.MONOLINGUAL

    def test_phrase_without_secondary_is_monolingual(self):
        assert select_mode(parse_origin("en-ph")) == ParseMode.MONOLINGUAL

    def test_bilingual_sentence(self):
        assert select_mode(parse_origin("en-vi")) == ParseMode.BILINGUAL_SENTENCE

    def test_bilingual_phrase(self):
        assert select_mode(parse_origin("en-vi-ph")) == ParseMode.BILINGUAL_PHRASE


class TestMonolingual:
    def test_abbreviation(self, id_factory):
        segments = segment("Dr. Smith went home. He was tired.", "en", id_factory=id_factory)
        assert texts(segments, "en") == ["Dr. Smith went home.", "He was tired."]
        assert [s.prefix for s in segments] == ["", ""]
        assert [s.suffix for s in segments] == ["", ""]

    def test_configured_abbreviations(self):
        config = SegmentationConfig(abbreviations=["Fig."])
        segments = segment("See Fig. Two below.", "en", config)
        assert texts(segments, "en") == ["See Fig. Two below."]

    def test_long_whitespace_run(self):
        start = time.perf_counter()
        segments = segment("a" + " " * 100_000 + "b.", "en")
        assert time.perf_counter() - start < 2.0
        assert texts(segments, "en") == ["a b."]

    def test_decimal(self):
        segments = segment("The value is 3.14 today.", "en")
        assert len(segments) == 1
        assert segments[0].block["en"] == "The value is 3.14 today."

    def test_block_shape(self):
        segments = segment("Hello there.", "en")
        assert isinstance(segments[0].block, SentenceBlock)
        assert segments[0].block.languages == ["en"]

    def test_structure(self):
        text = "# My Story\n\nIt was late. The end.\n- First item\n- Second item"
        segments = segment(text, "en")
        assert [(s.prefix, s.block["en"], s.suffix) for s in segments] == [
            ("# ", "My Story", "\n"),
            ("\n", "It was late.", ""),
            ("", "The end.", ""),
            ("\n- ", "First item", ""),
            ("\n- ", "Second item", ""),
        ]

    def test_footnotes_are_removed(self):
        segments = segment("Water boils[1] at 100 degrees.", "en")
        assert segments[0].block["en"] == "Water boils at 100 degrees."

    def test_footnotes_kept_when_disabled(self):
        config = SegmentationConfig(strip_footnotes=False)
        segments = segment("Water boils[1] at 100 degrees.", "en", config)
        assert segments[0].block["en"] == "Water boils[1] at 100 degrees."

    def test_chinese(self):
        segments = segment("你好。今天很好！", "zh")
        assert texts(segments, "zh") == ["你好。", "今天很好！"]

    def test_phrase_marker_without_secondary(self):
        segments = segment("Red, blue. Green.", "en-ph")
        assert texts(segments, "en") == ["Red, blue.", "Green."]
        assert all(isinstance(s.block, SentenceBlock) for s in segments)


class TestBilingualSentence:
    def test_pairs(self, id_factory):
        segments = segment(
            "Hello world {Xin chào thế giới}. Goodbye {Tạm biệt}.",
            "en-vi",
            id_factory=id_factory,
        )
        assert len(segments) == 2
        assert segments[0].block["en"] == "Hello world"
        assert segments[0].block["vi"] == "Xin chào thế giới"
        assert segments[0].suffix == "."
        assert segments[1].block["en"] == "Goodbye"
        assert segments[1].block["vi"] == "Tạm biệt"
        assert segments[1].suffix == "."

    def test_unterminated_delimiter(self):
        segments = segment("Hello {unfinished", "en-vi")
        assert len(segments) == 1
        assert segments[0].block["en"] == "Hello"
        assert segments[0].block["vi"] == "unfinished"
        assert segments[0].suffix == ""

    def test_unterminated_delimiter_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lingoseg.strategies"):
            segment("Hello {unfinished", "en-vi")
        assert "Unterminated delimiter" in caplog.text

    def test_heading_without_pair_joins_next_unit(self):
        segments = segment("# Title\nHello {Xin}.", "en-vi")
        assert len(segments) == 1
        assert segments[0].prefix == "# "
        assert segments[0].block.to_dict() == {"en": "Title\nHello", "vi": "Xin"}
        assert segments[0].suffix == "."

    def test_heading_and_paragraph(self):
        segments = segment("# Title {Tiêu đề}\n\nHello {Xin chào}.", "en-vi")
        assert [(s.prefix, s.block.to_dict(), s.suffix) for s in segments] == [
            ("# ", {"en": "Title", "vi": "Tiêu đề"}, "\n"),
            ("\n", {"en": "Hello", "vi": "Xin chào"}, "."),
        ]

    def test_untranslated_tail_has_empty_secondary(self):
        segments = segment("Hello {Xin chào}. Untranslated tail", "en-vi")
        assert segments[1].block.to_dict() == {"en": "Untranslated tail", "vi": ""}

    def test_no_paragraph_newline_when_disabled(self):
        config = SegmentationConfig(max_suffix_newlines=0)
        segments = segment("A {a}.\n\nB {b}.", "en-vi", config)
        assert segments[0].suffix == "."
        assert segments[1].prefix == "\n"

    def test_custom_delimiters(self):
        config = SegmentationConfig(delimiter_open="[", delimiter_close="]")
        segments = segment("Hi [Chào]. Bye [Tạm biệt].", "en-vi", config)
        assert texts(segments, "vi") == ["Chào", "Tạm biệt"]


class TestBilingualPhrase:
    def test_phrases(self):
        segments = segment("red, blue, green {đỏ, xanh, lục}", "en-vi-ph")
        assert len(segments) == 1
        block = segments[0].block
        assert isinstance(block, PhraseBlock)
        assert block["en"] == ("red", "blue", "green")
        assert block["vi"] == ("đỏ", "xanh", "lục")
        assert block.to_dict() == {
            "en": ["red", "blue", "green"],
            "vi": ["đỏ", "xanh", "lục"],
        }

    def test_uneven_phrase_counts(self):
        segments = segment("one, two, three {một, hai}", "en-vi-ph")
        assert len(segments[0].block["en"]) == 3
        assert len(segments[0].block["vi"]) == 2

    def test_lines_with_structure(self):
        segments = segment("## red, blue {đỏ, xanh}.\nplain, words\n\n", "en-vi-ph")
        assert len(segments) == 2
        assert segments[0].prefix == "## "
        assert segments[0].suffix == "."
        assert segments[1].prefix == "\n"
        assert segments[1].suffix == "\n"
        assert segments[1].block["en"] == ("plain", "words")
        assert segments[1].block["vi"] == ()


class TestFacade:
    @pytest.mark.parametrize("origin", ["", "   "])
    def test_blank_origin_raises(self, origin):
        with pytest.raises(ValidationError):
            segment("anything", origin)

    def test_empty_text(self):
        assert segment("", "en") == []

    def test_fallback_for_phrase_mode(self):
        raw = "—, ;"
        segments = segment(raw, "en-vi-ph")
        assert len(segments) == 1
        assert segments[0].order == 0
        assert segments[0].prefix == ""
        assert segments[0].suffix == ""
        assert segments[0].block["en"] == raw
        assert segments[0].block["vi"] == ""

    def test_fallback_for_missing_primary(self):
        segments = segment("{only secondary}", "en-vi")
        assert len(segments) == 1
        assert segments[0].block["en"] == "{only secondary}"

    def test_fallback_for_footnote_only(self):
        segments = segment("[1]", "en")
        assert segments[0].block["en"] == "[1]"

    def test_fallback_keeps_whitespace_verbatim(self):
        segments = segment("  \n ", "en")
        assert len(segments) == 1
        assert segments[0].block["en"] == "  \n "

    def test_fallback_disabled(self):
        config = SegmentationConfig(fallback_enabled=False)
        assert segment("{x}", "en-vi", config) == []

    @pytest.mark.parametrize(
        "text, origin",
        [
            ("One. Two. Three.", "en"),
            ("# H\n\nA. B.\n\n- c\n- d", "en"),
            ("A {a}. B {b}! C {c}?", "en-vi"),
            ("x, y {z}\nw\n\nv, u {t, s}", "en-vi-ph"),
            ("{", "en-vi"),
            ("。。。", "zh"),
        ],
    )
    def test_complete_and_contiguous(self, text, origin):
        segments = segment(text, origin)
        assert segments
        assert [s.order for s in segments] == list(range(len(segments)))

    def test_injected_ids(self, id_factory):
        segments = segment("One. Two.", "en", id_factory=id_factory)
        assert [s.id for s in segments] == ["seg-0", "seg-1"]

    def test_default_ids_are_unique(self):
        segments = segment("One. Two. Three. Four.", "en")
        assert len({s.id for s in segments}) == 4

    def test_segments_are_immutable(self):
        seg = segment("One.", "en")[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            seg.order = 5

    def test_calls_are_independent(self):
        first = segment("A {a}. B {b}.", "en-vi")
        second = segment("A {a}. B {b}.", "en-vi")
        assert [s.content for s in first] == [s.content for s in second]

    def test_to_dict(self, id_factory):
        seg = segment("Hello {Xin chào}.", "en-vi", id_factory=id_factory)[0]
        assert seg.to_dict() == {
            "id": "seg-0",
            "order": 0,
            "content": ["", {"en": "Hello", "vi": "Xin chào"}, "."],
        }
