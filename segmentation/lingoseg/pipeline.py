"""Batch segmentation pipeline over JSONL records."""

import json
import logging
import re
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
from tqdm import tqdm

from .book import parse_book
from .config import Config
from .exceptions import ValidationError
from .facade import segment
from .models import BookResult, PhraseBlock, Segment
from .utils.ids import IdFactory, new_id

logger = logging.getLogger(__name__)

# Regex pattern for illegal control characters (except tab, newline, carriage return)
ILLEGAL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub('', text)


def segments_to_rows(record_id: str, segments: list[Segment]) -> list[dict]:
    """Flatten segments into one row per segment for tabular output."""
    rows = []
    for seg in segments:
        row = {
            "Record_ID": record_id,
            "Segment_ID": seg.id,
            "Order": seg.order,
            "Prefix": seg.prefix,
            "Suffix": seg.suffix,
        }
        for lang in seg.block.languages:
            value = seg.block[lang]
            if isinstance(seg.block, PhraseBlock):
                value = " | ".join(value)
            row[f"Text_{lang}"] = value
        rows.append(row)
    return rows


class SegmentationPipeline:
    """Pipeline for segmenting generated text records."""

    def __init__(self, config: Optional[Config] = None, id_factory: IdFactory = new_id):
        """Initialize segmentation pipeline.

        Args:
            config: Pipeline configuration
            id_factory: Identifier generator shared by all segments
        """
        self.config = config or Config()
        self.id_factory = id_factory

    def segment(self, text: str, origin: Optional[str] = None) -> list[Segment]:
        """Segment one text with the given or the configured origin."""
        return segment(
            text,
            origin or self.config.origin,
            self.config.segmentation,
            self.id_factory,
        )

    def parse_book(self, markdown: str, origin: Optional[str] = None) -> BookResult:
        """Parse book markdown into a title and chapters."""
        return parse_book(
            markdown,
            origin or self.config.origin,
            self.config.segmentation,
            self.config.book,
            self.id_factory,
        )

    def process_records(self, records: Iterable[tuple[int, dict]]) -> list[dict]:
        """Segment ``(line_number, record)`` pairs.

        Records without text are skipped, as are records whose origin is
        rejected; both are logged.

        Returns:
            One result dict per segmented record
        """
        results = []
        for line_num, record in records:
            text_content = record.get("text") or record.get("content") or ""
            if not text_content:
                logger.debug("Line %d has no text, skipping", line_num)
                continue

            origin = record.get("origin") or self.config.origin
            record_id = str(record.get("id", line_num))
            try:
                segments = self.segment(text_content, origin)
            except ValidationError as e:
                logger.warning("Line %d skipped: %s", line_num, e)
                continue

            results.append(
                {
                    "id": record_id,
                    "origin": origin,
                    "segments": segments,
                }
            )
        return results

    def _read_records(self, input_path: Path) -> list[tuple[int, dict]]:
        records = []
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in enumerate(infile, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    records.append((line_num, json.loads(line)))
                except json.JSONDecodeError:
                    logger.warning("Line %d is not valid JSON, skipping", line_num)
        return records

    def _save_jsonl(self, results: list[dict], path: Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            for result in results:
                data = dict(result, segments=[s.to_dict() for s in result["segments"]])
                f.write(json.dumps(data, ensure_ascii=False) + "\n")

    def _save_csv(self, results: list[dict], path: Path) -> None:
        rows = []
        for result in results:
            rows.extend(segments_to_rows(result["id"], result["segments"]))
        df = pd.DataFrame(rows)
        for col in df.select_dtypes(include=["object"]).columns:
            df[col] = df[col].apply(
                lambda x: sanitize_text(x) if isinstance(x, str) else x
            )
        df.to_csv(path, index=False)

    def process_file(self, input_path: Path) -> int:
        """Process a JSONL file and write segmented output.

        Args:
            input_path: Path to input JSONL file

        Returns:
            Number of records segmented
        """
        logger.info("Reading from: %s", input_path)
        records = self._read_records(input_path)
        results = self.process_records(
            tqdm(records, total=len(records), desc="Segmenting")
        )

        output_dir = self.config.output.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        if self.config.output.save_jsonl:
            self._save_jsonl(results, output_dir / "segments.jsonl")
        if self.config.output.save_csv:
            self._save_csv(results, output_dir / "segments.csv")

        logger.info("Segmented %d records into %s", len(results), output_dir)
        return len(results)

    def run(self) -> int:
        """Run the segmentation pipeline.

        Returns:
            Number of records segmented
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
