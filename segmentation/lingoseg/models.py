"""Data models for the segmentation engine."""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union


@dataclass(frozen=True)
class FormatDirective:
    """Parsed form of a format descriptor such as ``en-vi-ph``."""

    primary: str
    secondary: Optional[str] = None
    is_phrase_mode: bool = False

    @property
    def is_bilingual(self) -> bool:
        return bool(self.secondary)

    @property
    def languages(self) -> list[str]:
        return [self.primary, self.secondary] if self.secondary else [self.primary]

    @property
    def unit(self) -> str:
        return "phrase" if self.is_phrase_mode else "sentence"


@dataclass(frozen=True)
class TextComponents:
    """A line split into structural prefix, payload and trailing suffix."""

    prefix: str
    content: str
    suffix: str


@dataclass(frozen=True)
class ScanUnit:
    """One ``prefix + primary {secondary} suffix`` occurrence."""

    prefix: str
    primary: str
    secondary: str
    suffix: str
    terminated: bool = True  # False when the closing delimiter was missing


@dataclass(frozen=True)
class SentenceBlock:
    """Language block holding one string per language (sentence mode)."""

    texts: dict[str, str]

    def __getitem__(self, lang: str) -> str:
        return self.texts[lang]

    def __contains__(self, lang: object) -> bool:
        return lang in self.texts

    def __iter__(self) -> Iterator[str]:
        return iter(self.texts)

    def get(self, lang: str, default: Optional[str] = None) -> Optional[str]:
        return self.texts.get(lang, default)

    @property
    def languages(self) -> list[str]:
        return list(self.texts)

    def to_dict(self) -> dict[str, str]:
        return dict(self.texts)


@dataclass(frozen=True)
class PhraseBlock:
    """Language block holding an ordered phrase list per language (phrase mode)."""

    phrases: dict[str, tuple[str, ...]]

    def __getitem__(self, lang: str) -> tuple[str, ...]:
        return self.phrases[lang]

    def __contains__(self, lang: object) -> bool:
        return lang in self.phrases

    def __iter__(self) -> Iterator[str]:
        return iter(self.phrases)

    def get(
        self, lang: str, default: Optional[tuple[str, ...]] = None
    ) -> Optional[tuple[str, ...]]:
        return self.phrases.get(lang, default)

    @property
    def languages(self) -> list[str]:
        return list(self.phrases)

    def to_dict(self) -> dict[str, list[str]]:
        return {lang: list(values) for lang, values in self.phrases.items()}


LanguageBlock = Union[SentenceBlock, PhraseBlock]


@dataclass(frozen=True)
class Segment:
    """One addressable unit of parsed content."""

    id: str
    order: int
    content: tuple[str, LanguageBlock, str]

    @property
    def prefix(self) -> str:
        return self.content[0]

    @property
    def block(self) -> LanguageBlock:
        return self.content[1]

    @property
    def suffix(self) -> str:
        return self.content[2]

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "id": self.id,
            "order": self.order,
            "content": [self.prefix, self.block.to_dict(), self.suffix],
        }


@dataclass
class ChapterStats:
    """Word and reading-time statistics for a chapter."""

    total_segments: int
    total_words: int
    estimated_reading_time: int  # minutes


@dataclass
class Chapter:
    """A chapter of a parsed book."""

    id: str
    order: int
    title: SentenceBlock
    segments: list[Segment]
    stats: ChapterStats

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "order": self.order,
            "title": self.title.to_dict(),
            "segments": [segment.to_dict() for segment in self.segments],
            "stats": {
                "totalSegments": self.stats.total_segments,
                "totalWords": self.stats.total_words,
                "estimatedReadingTime": self.stats.estimated_reading_time,
            },
        }


@dataclass
class BookResult:
    """Result of parsing book-level markdown."""

    title: SentenceBlock
    chapters: list[Chapter] = field(default_factory=list)
    unit: str = "sentence"

    def to_dict(self) -> dict:
        return {
            "title": self.title.to_dict(),
            "unit": self.unit,
            "chapters": [chapter.to_dict() for chapter in self.chapters],
        }
