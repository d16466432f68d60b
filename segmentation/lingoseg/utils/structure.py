"""Recovery of structural markdown prefixes and punctuation suffixes.

A line such as ``"## Chapter One {Chương Một}."`` is split into the
structural prefix ``"## "``, the payload ``"Chapter One {Chương Một}"`` and the
suffix ``"."``. Prefixes and suffixes are kept verbatim so the original shape
can be approximately rebuilt for display.

Line breaks are carried the same way everywhere: a text that follows a line
break gets a single ``"\\n"`` in its prefix, and a paragraph break (two or
more newlines) additionally folds newlines into the preceding suffix, up to a
configurable maximum.
"""

import re

from ..models import TextComponents

# Leading newline run, then at most one heading, blockquote or list marker
PREFIX_PATTERN = re.compile(
    r"(?P<newlines>(?:[ \t]*\r?\n)*)"
    r"(?P<marker>[ \t]*(?:#{1,6}|>|[-*+]|\d+\.)[ \t]+)?"
)

# Sentence/clause punctuation and closing brackets or quotes. Inline
# delimiters are not included: "...text}." keeps "}" in the payload.
SUFFIX_CHARS = ".!?…,;:\"'”’»)]。！？，；：、」』）؟،؛"

PUNCT_RUN = re.compile(f"[{re.escape(SUFFIX_CHARS)}]*")
NEWLINE_RUN = re.compile(r"(?:[ \t]*\r?\n)+")
LINE_BREAKS = re.compile(r"(\r?\n(?:[ \t]*\r?\n)*)")


def match_prefix(text: str, pos: int = 0) -> tuple[str, int]:
    """Match a structural prefix at ``pos``.

    Args:
        text: Text to inspect
        pos: Position to match at

    Returns:
        Tuple of (prefix, end position). Leading blank lines are reduced to
        their newline characters.
    """
    match = PREFIX_PATTERN.match(text, pos)
    newlines = match.group("newlines").count("\n")
    marker = match.group("marker") or ""
    return "\n" * newlines + marker, match.end()


def fold_newlines(count: int, max_newlines: int) -> str:
    """Newlines kept in a suffix for a run of ``count`` line breaks.

    A single line break is left to the next prefix; a paragraph break keeps
    ``count - 1`` newlines, capped at ``max_newlines``.
    """
    if count < 2:
        return ""
    return "\n" * min(count - 1, max_newlines)


def match_suffix(text: str, pos: int, max_newlines: int = 1) -> tuple[str, int]:
    """Match a trailing suffix starting at ``pos``.

    The punctuation run is taken verbatim. If a paragraph break follows, the
    folded newlines are appended and the returned position stops at the last
    newline of the break, so the next unit starts with exactly one newline.

    Returns:
        Tuple of (suffix, end position)
    """
    punct = PUNCT_RUN.match(text, pos)
    suffix = punct.group(0)
    end = punct.end()

    breaks = NEWLINE_RUN.match(text, end)
    if breaks:
        count = breaks.group(0).count("\n")
        if count >= 2:
            suffix += fold_newlines(count, max_newlines)
            end = breaks.start() + breaks.group(0).rfind("\n")
    return suffix, end


def extract(line: str, max_newlines: int = 1) -> TextComponents:
    """Split one line into prefix, payload and suffix.

    Args:
        line: A single line, optionally with leading/trailing newlines
        max_newlines: Maximum newlines a paragraph break folds into the suffix

    Returns:
        TextComponents with a trimmed payload
    """
    prefix, start = match_prefix(line)
    rest = line[start:]

    # Scanned from the right so the cost stays linear in the line length
    body = rest.rstrip()
    trail = rest[len(body):]
    content = body.rstrip(SUFFIX_CHARS)
    punct = body[len(content):]

    return TextComponents(
        prefix=prefix,
        content=content.strip(),
        suffix=punct + fold_newlines(trail.count("\n"), max_newlines),
    )


def split_suffix(suffix: str) -> tuple[str, str]:
    """Split a suffix into its punctuation and its folded newlines."""
    punct = suffix.rstrip("\n")
    return punct, suffix[len(punct):]


def split_lines(text: str) -> list[str]:
    """Split text into non-blank lines, carrying line breaks for ``extract``.

    Each returned line starts with ``"\\n"`` when it follows a line break and
    ends with the full newline run when a paragraph break follows it.
    Whitespace-only lines count as part of the break.
    """
    parts = LINE_BREAKS.split(text.replace("\r\n", "\n"))
    lines = []
    for i in range(0, len(parts), 2):
        body = parts[i]
        if not body.strip():
            continue
        lead = "\n" if i > 0 else ""
        following = parts[i + 1].count("\n") if i + 1 < len(parts) else 0
        trail = "\n" * following if following >= 2 else ""
        lines.append(lead + body + trail)
    return lines
