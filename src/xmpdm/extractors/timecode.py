"""Start and alternate timecode extraction."""

from __future__ import annotations

import logging
from typing import ClassVar

from xmpdm.extractors.base import BaseExtractor, ExtractionContext
from xmpdm.models import TimeFormat, Timecode
from xmpdm.schema import Property, TimecodeField
from xmpdm.utils.xml import XMLNode

logger = logging.getLogger(__name__)


def parse_timecode(node: XMLNode | None) -> Timecode | None:
    """Parse a Timecode struct.

    <xmpDM:startTimecode rdf:parseType="Resource">
        <xmpDM:timeFormat>25Timecode</xmpDM:timeFormat>
        <xmpDM:timeValue>00:00:00:00</xmpDM:timeValue>
    </xmpDM:startTimecode>

    Returns:
        The timecode, or None if the format is unknown, the value is not a
        timecode, or any component is out of range for the rate
    """
    if node is None:
        return None

    raw_format = node.field(TimecodeField.TIME_FORMAT)
    time_format = TimeFormat.parse(raw_format)
    time_value = node.field(TimecodeField.TIME_VALUE)
    if time_format is None or time_value is None:
        if raw_format is not None and time_format is None:
            logger.debug(f"Unknown time format {raw_format!r}")
        return None

    try:
        timecode = Timecode.from_string(time_value, time_format.frame_rate)
    except ValueError:
        logger.debug(f"Unparseable timecode {time_value!r}")
        return None

    if not timecode.is_valid:
        invalid = ", ".join(sorted(timecode.invalid_components))
        logger.debug(
            f"Rejected timecode {time_value!r} at {time_format.value}: invalid {invalid}"
        )
        return None

    return timecode


class TimecodeExtractor(BaseExtractor):
    """Extract xmpDM:startTimecode and xmpDM:altTimecode."""

    name: ClassVar[str] = "timecode"
    priority: ClassVar[int] = 20

    def extract(self, context: ExtractionContext) -> None:
        """Extract both timecodes, keeping only valid ones."""
        desc = context.description
        if desc is None:
            return

        start = parse_timecode(desc.child(Property.START_TIMECODE))
        if start is not None:
            context.fields["start_timecode"] = start

        alt = parse_timecode(desc.child(Property.ALT_TIMECODE))
        if alt is not None:
            context.fields["alt_timecode"] = alt
