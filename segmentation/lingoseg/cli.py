"""Command-line interface for the segmentation pipeline."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import Config
from .exceptions import ValidationError
from .pipeline import SegmentationPipeline

COMMANDS = ("segment", "text", "book")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Segment generated text into ordered multilingual segments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Segment a JSONL file of {"text": ..., "origin": ...} records
  lingoseg segment --input data/pieces.jsonl --output data/segments

  # Using a config file
  lingoseg segment --config config.yaml

  # Segment a single text
  lingoseg text --origin en-vi "Hello {Xin chào}. Goodbye {Tạm biệt}."

  # Parse a book with chapters
  lingoseg book --origin en-vi --input book.md
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    segment_parser = subparsers.add_parser("segment", help="Segment a JSONL file")
    setup_segment_parser(segment_parser)

    text_parser = subparsers.add_parser("text", help="Segment a single text")
    setup_text_parser(text_parser)

    book_parser = subparsers.add_parser("book", help="Parse book markdown")
    setup_book_parser(book_parser)

    # If no command specified, treat as segment command
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv or (argv[0] not in COMMANDS and argv[0] not in ("-h", "--help")):
        argv = ["segment", *argv]

    return parser.parse_args(argv)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--origin",
        type=str,
        help="Format descriptor, e.g. en, en-vi, en-vi-ph (default: en)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_segment_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for segment command."""
    _add_common_arguments(parser)
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input JSONL file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for segmented files",
    )
    parser.add_argument(
        "--no-jsonl",
        action="store_true",
        help="Skip saving segments.jsonl",
    )
    parser.add_argument(
        "--no-csv",
        action="store_true",
        help="Skip saving segments.csv",
    )


def setup_text_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for text command."""
    _add_common_arguments(parser)
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment (read from stdin when omitted)",
    )


def setup_book_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for book command."""
    _add_common_arguments(parser)
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to book markdown (read from stdin when omitted)",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    if getattr(args, "origin", None):
        config.origin = args.origin
    if getattr(args, "input", None) and args.command == "segment":
        config.input_file = args.input
    if getattr(args, "output", None):
        config.output.output_dir = args.output
    if getattr(args, "no_jsonl", False):
        config.output.save_jsonl = False
    if getattr(args, "no_csv", False):
        config.output.save_csv = False

    return config


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def handle_text(args: argparse.Namespace, config: Config) -> int:
    """Handle text command."""
    text = args.text if args.text is not None else sys.stdin.read()
    try:
        segments = SegmentationPipeline(config).segment(text)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _print_json([s.to_dict() for s in segments])
    return 0


def handle_book(args: argparse.Namespace, config: Config) -> int:
    """Handle book command."""
    try:
        if args.input:
            markdown = args.input.read_text(encoding="utf-8")
        else:
            markdown = sys.stdin.read()
        book = SegmentationPipeline(config).parse_book(markdown)
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _print_json(book.to_dict())
    return 0


def handle_segment(config: Config) -> int:
    """Handle segment command."""
    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    try:
        pipeline = SegmentationPipeline(config)
        count = pipeline.run()
        print(f"\nSegmented {count} records")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Segmentation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(getattr(args, "verbose", False))

    try:
        config = build_config(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "text":
        return handle_text(args, config)
    if args.command == "book":
        return handle_book(args, config)
    return handle_segment(config)


if __name__ == "__main__":
    sys.exit(main())
