"""Single entry point: validate the origin, run one strategy, fall back."""

import logging
from typing import Optional

from .config import SegmentationConfig
from .models import FormatDirective, Segment, SentenceBlock
from .origin import parse_origin
from .strategies import run_strategy, select_mode
from .utils.ids import IdFactory, new_id

logger = logging.getLogger(__name__)


def fallback_segment(
    raw_text: str, directive: FormatDirective, id_factory: IdFactory = new_id
) -> Segment:
    """Single segment carrying the unparsed input verbatim."""
    texts = {directive.primary: raw_text}
    if directive.secondary:
        texts[directive.secondary] = ""
    return Segment(id=id_factory(), order=0, content=("", SentenceBlock(texts), ""))


def segment(
    raw_text: str,
    origin: str,
    config: Optional[SegmentationConfig] = None,
    id_factory: IdFactory = new_id,
) -> list[Segment]:
    """Convert raw generated text into ordered segments.

    Args:
        raw_text: Text with optional markdown markers and ``{...}`` translations
        origin: Format descriptor, e.g. ``"en"``, ``"en-vi"``, ``"en-vi-ph"``
        config: Engine configuration
        id_factory: Callable returning a fresh identifier per segment

    Returns:
        Segments with contiguous ``order`` values. Non-empty input always
        yields at least one segment.

    Raises:
        ValidationError: If ``origin`` is blank
    """
    if config is None:
        config = SegmentationConfig()

    directive = parse_origin(origin, config.phrase_marker)
    if not raw_text:
        return []

    mode = select_mode(directive)
    segments = run_strategy(mode, raw_text, directive, config, id_factory)

    if not segments and config.fallback_enabled:
        logger.info(
            "No segments produced in %s mode for origin %r; using fallback segment",
            mode.value,
            origin,
        )
        segments = [fallback_segment(raw_text, directive, id_factory)]
    return segments
