"""Sequential scanner for inline bilingual text.

Reads text shaped as repeated ``prefix primary {secondary} suffix`` units in a
single left-to-right pass. Pairs are not nested: an opening delimiter inside
a pair is ordinary secondary text.
"""

from .models import ScanUnit
from .utils.structure import match_prefix, match_suffix


def scan_pairs(
    text: str,
    delimiter_open: str = "{",
    delimiter_close: str = "}",
    max_suffix_newlines: int = 1,
) -> list[ScanUnit]:
    """Scan text into (prefix, primary, secondary, suffix) units.

    Args:
        text: Full text, not split into lines
        delimiter_open: Character opening the secondary text
        delimiter_close: Character closing the secondary text
        max_suffix_newlines: Newlines a paragraph break may fold into a suffix

    Returns:
        Units in text order. A trailing run without an opening delimiter
        becomes a unit with empty secondary text; an unterminated pair keeps
        its partial secondary text and an empty suffix.
    """
    units: list[ScanUnit] = []
    length = len(text)
    cursor = 0

    while cursor < length:
        prefix, cursor = match_prefix(text, cursor)

        open_at = text.find(delimiter_open, cursor)
        if open_at == -1:
            primary = text[cursor:].strip()
            if primary:
                units.append(ScanUnit(prefix, primary, "", ""))
            break

        primary = text[cursor:open_at].strip()
        close_at = text.find(delimiter_close, open_at + 1)
        if close_at == -1:
            secondary = text[open_at + 1 :].strip()
            units.append(ScanUnit(prefix, primary, secondary, "", terminated=False))
            break

        secondary = text[open_at + 1 : close_at].strip()
        suffix, cursor = match_suffix(text, close_at + 1, max_suffix_newlines)
        units.append(ScanUnit(prefix, primary, secondary, suffix))

    return units


def match_single_pair(
    text: str, delimiter_open: str = "{", delimiter_close: str = "}"
) -> tuple[str, str] | None:
    """Match ``primary {secondary}`` where the pair closes the text.

    The first opening delimiter and the last closing delimiter bound the
    secondary text.

    Returns:
        Tuple of (primary, secondary), or None when the text has no such pair
    """
    stripped = text.rstrip()
    if not stripped.endswith(delimiter_close):
        return None
    open_at = stripped.find(delimiter_open)
    if open_at == -1:
        return None
    return stripped[:open_at].strip(), stripped[open_at + 1 : -1].strip()
