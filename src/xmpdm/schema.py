"""XMP element vocabulary.

Qualified (``prefix:local``) names of every element the extractors look for,
grouped by the structural role they play in an XMP Dynamic Media document.

Reference:
https://developer.adobe.com/xmp/docs/XMPNamespaces/xmpDM/
"""

from __future__ import annotations

from enum import Enum

# Prefix -> namespace URI. Matching is done on the URI, so a document that
# binds a different prefix to the same namespace still resolves.
NAMESPACES: dict[str, str] = {
    "x": "adobe:ns:meta/",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "xml": "http://www.w3.org/XML/1998/namespace",
    "xmp": "http://ns.adobe.com/xap/1.0/",
    "xmpDM": "http://ns.adobe.com/xmp/1.0/DynamicMedia/",
    "xmpMM": "http://ns.adobe.com/xap/1.0/mm/",
    "stDim": "http://ns.adobe.com/xap/1.0/sType/Dimensions#",
    "dc": "http://purl.org/dc/elements/1.1/",
}


def qualify(name: str) -> str:
    """Convert ``prefix:local`` into lxml's ``{uri}local`` notation.

    Unknown prefixes are returned unchanged, which never matches a
    namespaced element.
    """
    prefix, sep, local = name.partition(":")
    if not sep:
        return name
    uri = NAMESPACES.get(prefix)
    if uri is None:
        return name
    return f"{{{uri}}}{local}"


class RDF(str, Enum):
    """RDF structural elements."""

    XMPMETA = "x:xmpmeta"
    RDF = "rdf:RDF"
    DESCRIPTION = "rdf:Description"
    BAG = "rdf:Bag"
    SEQ = "rdf:Seq"
    ALT = "rdf:Alt"
    LI = "rdf:li"


class Property(str, Enum):
    """Top-level properties of the description container."""

    TITLE = "dc:title"
    CREATOR_TOOL = "xmp:CreatorTool"
    CREATE_DATE = "xmp:CreateDate"

    AUDIO_CHANNEL_TYPE = "xmpDM:audioChannelType"
    AUDIO_SAMPLE_RATE = "xmpDM:audioSampleRate"
    VIDEO_FRAME_RATE = "xmpDM:videoFrameRate"
    VIDEO_FRAME_SIZE = "xmpDM:videoFrameSize"
    VIDEO_FIELD_ORDER = "xmpDM:videoFieldOrder"

    START_TIMECODE = "xmpDM:startTimecode"
    # Set by the user; takes precedence over startTimecode
    ALT_TIMECODE = "xmpDM:altTimecode"
    START_TIME_SCALE = "xmpDM:startTimeScale"
    START_TIME_SAMPLE_SIZE = "xmpDM:startTimeSampleSize"
    DURATION = "xmpDM:duration"

    TRACKS = "xmpDM:Tracks"
    TRACK_TYPE = "xmpDM:trackType"
    TRACK_NAME = "xmpDM:trackName"
    MARKERS = "xmpDM:markers"


class TimecodeField(str, Enum):
    """Sub-elements of a Timecode struct."""

    TIME_FORMAT = "xmpDM:timeFormat"
    TIME_VALUE = "xmpDM:timeValue"


class TimeField(str, Enum):
    """Sub-elements of a Time struct (frame count + rational scale)."""

    VALUE = "xmpDM:value"
    SCALE = "xmpDM:scale"


class MarkerField(str, Enum):
    """Sub-elements of a Marker struct."""

    TYPE = "xmpDM:type"
    NAME = "xmpDM:name"
    COMMENT = "xmpDM:comment"
    START_TIME = "xmpDM:startTime"
    DURATION = "xmpDM:duration"


class DimensionsField(str, Enum):
    """Sub-elements of a Dimensions struct."""

    WIDTH = "stDim:w"
    HEIGHT = "stDim:h"
    UNIT = "stDim:unit"
