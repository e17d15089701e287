"""Field group extractors for xmpdm."""

from __future__ import annotations

import logging
from typing import Any

from xmpdm.extractors.base import BaseExtractor, ExtractionContext
from xmpdm.extractors.basic import BasicExtractor
from xmpdm.extractors.markers import MarkerExtractor
from xmpdm.extractors.media import MediaExtractor
from xmpdm.extractors.timecode import TimecodeExtractor
from xmpdm.extractors.tracks import TrackExtractor

logger = logging.getLogger(__name__)

# All extractor classes (order doesn't matter, priority is used)
_EXTRACTORS: list[type[BaseExtractor]] = [
    BasicExtractor,
    TimecodeExtractor,
    MediaExtractor,
    TrackExtractor,
    MarkerExtractor,
]


def get_extractors() -> list[BaseExtractor]:
    """Get extractor instances, sorted by priority (lowest first)."""
    extractors = [extractor_cls() for extractor_cls in _EXTRACTORS]
    extractors.sort(key=lambda x: x.priority)
    return extractors


def extract_fields(context: ExtractionContext) -> dict[str, Any]:
    """Run every extractor over a document.

    An extractor that fails leaves its fields unset; the others still run.

    Returns:
        Collected XMPMetadata field values
    """
    for extractor in get_extractors():
        try:
            extractor.extract(context)
        except Exception as e:
            logger.warning(f"{extractor.name} extraction failed: {e}")
    return context.fields


__all__ = [
    # Base class
    "BaseExtractor",
    "ExtractionContext",
    # Extractors
    "BasicExtractor",
    "TimecodeExtractor",
    "MediaExtractor",
    "TrackExtractor",
    "MarkerExtractor",
    # Functions
    "get_extractors",
    "extract_fields",
]
