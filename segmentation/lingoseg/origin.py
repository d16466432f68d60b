"""Format descriptor ("origin") parsing.

An origin declares the languages of a piece of content and how bilingual text
is paired:

- ``en``        monolingual English
- ``en-vi``     English with Vietnamese, paired by sentence
- ``en-vi-ph``  English with Vietnamese, paired by phrase
"""

import re
from typing import Optional

from .exceptions import ValidationError
from .models import FormatDirective

PHRASE_MARKER = "ph"

LANGUAGE_CODE = re.compile(r"^[a-z]{2}$")


def parse_origin(origin: str, phrase_marker: str = PHRASE_MARKER) -> FormatDirective:
    """Decode an origin into a FormatDirective.

    The first token is the primary language. Among the remaining tokens the
    phrase marker enables phrase mode and the first other token becomes the
    secondary language; anything further is ignored.

    Args:
        origin: Descriptor string, e.g. ``"en-vi-ph"``
        phrase_marker: Token that switches on phrase mode

    Returns:
        Parsed FormatDirective

    Raises:
        ValidationError: If the descriptor is blank or has no primary language
    """
    if not origin or not origin.strip():
        raise ValidationError("Origin cannot be empty")

    primary, *rest = [token.strip() for token in origin.strip().split("-")]
    if not primary:
        raise ValidationError(f"Origin has no primary language: {origin!r}")

    is_phrase = phrase_marker in rest
    secondary = next((token for token in rest if token and token != phrase_marker), None)

    return FormatDirective(primary=primary, secondary=secondary, is_phrase_mode=is_phrase)


def validate_origin(origin: str, phrase_marker: str = PHRASE_MARKER) -> None:
    """Strict validation for callers that build origins from user input.

    Raises:
        ValidationError: If the origin is empty, has more than three parts,
            uses a non two-letter language code or an unknown flag
    """
    if not origin or not origin.strip():
        raise ValidationError("Origin cannot be empty")

    parts = origin.split("-")
    if len(parts) > 3:
        raise ValidationError(f"Invalid origin format: {origin}")

    if not LANGUAGE_CODE.match(parts[0]):
        raise ValidationError(f"Invalid primary language in origin: {origin}")

    flags = [p for p in parts if not LANGUAGE_CODE.match(p)]
    if len(flags) > 1 or (flags and flags[0] != phrase_marker):
        raise ValidationError(f"Invalid format flag in origin: {origin}")


def build_origin(
    languages: list[str], unit: str = "sentence", phrase_marker: str = PHRASE_MARKER
) -> str:
    """Compose an origin from selected languages and a content unit.

    A secondary language equal to the primary is dropped, and the phrase marker
    is only added for bilingual content.
    """
    if not languages:
        raise ValidationError("At least one language must be provided")

    primary = languages[0]
    secondary: Optional[str] = languages[1] if len(languages) > 1 else None

    origin = primary
    if secondary and secondary != primary:
        origin += f"-{secondary}"
        if unit == "phrase":
            origin += f"-{phrase_marker}"
    return origin


def origin_languages(origin: str) -> list[str]:
    """Return ``[primary]`` or ``[primary, secondary]``."""
    return parse_origin(origin).languages


def origin_unit(origin: str) -> str:
    """Return ``"phrase"`` or ``"sentence"``."""
    return parse_origin(origin).unit
