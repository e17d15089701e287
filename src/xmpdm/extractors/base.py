"""Base extractor class."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from xmpdm.utils.xml import XMLNode


@dataclass
class ExtractionContext:
    """State shared by the extractors while one document is read.

    Attributes:
        root: Document root
        description: First rdf:Description, None if the document has none
        fields: Collected XMPMetadata field values, keyed by field name
    """

    root: XMLNode
    description: XMLNode | None
    fields: dict[str, Any] = field(default_factory=dict)


class BaseExtractor(ABC):
    """Abstract base class for field group extractors.

    Each extractor reads one group of related properties and stores the
    values it could parse in ``context.fields``. Properties that are missing
    or malformed are simply not stored.

    Attributes:
        name: Human-readable name of the extractor
        priority: Lower numbers run first (default: 100)
    """

    name: ClassVar[str] = "base"
    priority: ClassVar[int] = 100

    @abstractmethod
    def extract(self, context: ExtractionContext) -> None:
        """Extract fields into the context.

        Args:
            context: Extraction state (fields dict modified in place)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"


def parse_float(value: str | None) -> float | None:
    """Parse a finite float, None if unparseable."""
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_int(value: str | None) -> int | None:
    """Parse an integer, None if unparseable."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
