"""Tests for the command-line interface."""

import io
import json

import pytest

from lingoseg.cli import main, parse_args


@pytest.fixture
def jsonl_file(tmp_path):
    path = tmp_path / "pieces.jsonl"
    path.write_text(
        json.dumps({"id": "a", "text": "One. Two."}) + "\n", encoding="utf-8"
    )
    return path


def test_parse_args_defaults_to_segment(jsonl_file):
    args = parse_args(["--input", str(jsonl_file)])
    assert args.command == "segment"
    assert args.input == jsonl_file


def test_text_command(capsys):
    assert main(["text", "--origin", "en-vi", "Hello {Xin chào}."]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0]["order"] == 0
    assert data[0]["content"] == ["", {"en": "Hello", "vi": "Xin chào"}, "."]


def test_text_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("One. Two."))
    assert main(["text"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [s["content"][1]["en"] for s in data] == ["One.", "Two."]


def test_text_invalid_origin(capsys):
    assert main(["text", "--origin", "   ", "Hello."]) == 1
    assert "Error" in capsys.readouterr().err


def test_book_command(tmp_path, capsys):
    path = tmp_path / "book.md"
    path.write_text("# Title {Tựa}\n## One {Một}\nHi {Chào}.", encoding="utf-8")
    assert main(["book", "--origin", "en-vi", "--input", str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == {"en": "Title", "vi": "Tựa"}
    assert data["chapters"][0]["title"] == {"en": "One", "vi": "Một"}


def test_book_missing_file(tmp_path):
    assert main(["book", "--input", str(tmp_path / "missing.md")]) == 1


def test_segment_command(tmp_path, jsonl_file):
    out = tmp_path / "out"
    assert main(["segment", "--input", str(jsonl_file), "--output", str(out)]) == 0
    assert (out / "segments.jsonl").exists()
    assert (out / "segments.csv").exists()


def test_segment_without_subcommand(tmp_path, jsonl_file):
    out = tmp_path / "out"
    assert main(["--input", str(jsonl_file), "--output", str(out), "--no-csv"]) == 0
    assert (out / "segments.jsonl").exists()
    assert not (out / "segments.csv").exists()


def test_segment_missing_input(tmp_path):
    assert main(["segment", "--input", str(tmp_path / "missing.jsonl")]) == 1


def test_segment_requires_input():
    assert main(["segment"]) == 1
