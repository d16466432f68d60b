"""Configuration management for the segmentation engine."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator


# Compared case-insensitively against the word preceding a period, without the period.
DEFAULT_ABBREVIATIONS = [
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr",
    "ph.d", "m.d", "u.s", "u.k", "u.s.a",
    "etc", "vs", "e.g", "i.e", "st", "ave", "blvd", "rd",
]


class SegmentationConfig(BaseModel):
    """Configuration for the segmentation engine."""

    abbreviations: list[str] = Field(default_factory=lambda: list(DEFAULT_ABBREVIATIONS))
    max_suffix_newlines: int = Field(
        default=1,
        ge=0,
        description="Newlines a paragraph break may fold into a segment suffix",
    )
    delimiter_open: str = "{"
    delimiter_close: str = "}"
    phrase_marker: str = "ph"
    phrase_separators: str = ",;—，；、"
    strip_footnotes: bool = True
    fallback_enabled: bool = True

    @field_validator("delimiter_open", "delimiter_close")
    @classmethod
    def single_character(cls, v: str) -> str:
        """Delimiters are scanned character by character."""
        if len(v) != 1:
            raise ValueError("delimiter must be a single character")
        return v

    @field_validator("abbreviations")
    @classmethod
    def normalize_abbreviations(cls, v: list[str]) -> list[str]:
        """Lower-case entries and drop a trailing period."""
        return [a.strip().lower().rstrip(".") for a in v if a.strip()]

    @property
    def abbreviation_set(self) -> frozenset[str]:
        return frozenset(self.abbreviations)


class BookConfig(BaseModel):
    """Configuration for book/chapter assembly."""

    words_per_minute: int = Field(default=200, ge=1)
    default_title: str = "Untitled"
    default_chapter_title: str = "Chapter {n}"


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/segmented_output")
    save_jsonl: bool = True  # One JSON object per input record
    save_csv: bool = True    # One row per segment


class Config(BaseModel):
    """Main configuration for the segmentation pipeline."""

    input_file: Optional[Path] = None
    origin: str = "en"
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    book: BookConfig = Field(default_factory=BookConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
