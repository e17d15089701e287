"""Duration and video frame size extraction."""

from typing import ClassVar

from xmpdm.extractors.base import BaseExtractor, ExtractionContext, parse_float, parse_int
from xmpdm.models import VideoFrameSize
from xmpdm.schema import DimensionsField, Property, TimeField
from xmpdm.utils.timescale import parse_time_scale
from xmpdm.utils.xml import XMLNode


def parse_duration(node: XMLNode | None) -> float | None:
    """Parse a Time struct into seconds.

    <xmpDM:duration rdf:parseType="Resource">
        <xmpDM:value>8800</xmpDM:value>
        <xmpDM:scale>1/2500</xmpDM:scale>
    </xmpDM:duration>
    """
    if node is None:
        return None
    frame_count = parse_float(node.field(TimeField.VALUE))
    scale = parse_time_scale(node.field(TimeField.SCALE))
    if frame_count is None or scale is None:
        return None
    return frame_count * float(scale)


def parse_frame_size(node: XMLNode | None) -> VideoFrameSize | None:
    """Parse a Dimensions struct; both width and height are required.

    <xmpDM:videoFrameSize rdf:parseType="Resource">
        <stDim:w>1920</stDim:w>
        <stDim:h>1080</stDim:h>
        <stDim:unit>pixel</stDim:unit>
    </xmpDM:videoFrameSize>
    """
    if node is None:
        return None
    width = parse_int(node.field(DimensionsField.WIDTH))
    height = parse_int(node.field(DimensionsField.HEIGHT))
    if width is None or height is None:
        return None
    return VideoFrameSize(width=width, height=height)


class MediaExtractor(BaseExtractor):
    """Extract xmpDM:duration and xmpDM:videoFrameSize."""

    name: ClassVar[str] = "media"
    priority: ClassVar[int] = 30

    def extract(self, context: ExtractionContext) -> None:
        desc = context.description
        if desc is None:
            return

        duration = parse_duration(desc.child(Property.DURATION))
        if duration is not None:
            context.fields["duration"] = duration

        frame_size = parse_frame_size(desc.child(Property.VIDEO_FRAME_SIZE))
        if frame_size is not None:
            context.fields["video_frame_size"] = frame_size
