"""Marker extraction."""

from __future__ import annotations

import logging
from typing import ClassVar

from xmpdm.extractors.base import BaseExtractor, ExtractionContext, parse_int
from xmpdm.models import FrameRate, Marker, resolve_frame_rate
from xmpdm.schema import RDF, MarkerField, Property
from xmpdm.utils.xml import XMLNode

logger = logging.getLogger(__name__)


def parse_marker(node: XMLNode, frame_rate: FrameRate) -> Marker | None:
    """Parse one marker list item.

    <rdf:li rdf:parseType="Resource">
        <xmpDM:startTime>57</xmpDM:startTime>
        <xmpDM:duration>8</xmpDM:duration>
        <xmpDM:name>h</xmpDM:name>
    </rdf:li>

    Returns:
        The marker, or None if it has no usable start time
    """
    start_frame = parse_int(node.field(MarkerField.START_TIME))
    if start_frame is None:
        return None

    duration = parse_int(node.field(MarkerField.DURATION))
    if duration is None or duration < 0:
        duration = 0

    return Marker(
        name=node.field(MarkerField.NAME) or "",
        comment=node.field(MarkerField.COMMENT) or "",
        start_frame=start_frame,
        duration_frames=duration,
        frame_rate=frame_rate,
        marker_type=node.field(MarkerField.TYPE),
    )


class MarkerExtractor(BaseExtractor):
    """Extract markers from every xmpDM:markers list in the document.

    Markers appear both per track and at document level, so all lists are
    collected, in document order. Markers only carry frame numbers; without
    a document frame rate none are reported.
    """

    name: ClassVar[str] = "markers"
    priority: ClassVar[int] = 50  # needs the timecodes and nominal rate

    def extract(self, context: ExtractionContext) -> None:
        items: list[XMLNode] = []
        for container in context.root.iter_all(Property.MARKERS):
            seq = container.child(RDF.SEQ)
            if seq is not None:
                items.extend(seq.children(RDF.LI))
        if not items:
            return

        fields = context.fields
        frame_rate = resolve_frame_rate(
            fields.get("start_timecode"), fields.get("nominal_frame_rate")
        )
        if frame_rate is None:
            logger.warning(
                f"No frame rate in XMP data, ignoring {len(items)} marker(s) "
                "that cannot be timed"
            )
            return

        markers = []
        for item in items:
            marker = parse_marker(item, frame_rate)
            if marker is not None:
                markers.append(marker)
        fields["markers"] = tuple(markers)
