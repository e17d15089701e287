"""Main XMPMetadata model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .marker import Marker
from .timecode import FrameRate, Timecode

if TYPE_CHECKING:
    from xmpdm.config import XmpdmConfig


class VideoFrameSize(BaseModel):
    """Video frame dimensions in pixels."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def resolve_start_timecode(
    start_timecode: Timecode | None, alt_timecode: Timecode | None
) -> Timecode | None:
    """Return the user-set alternate timecode if present, else the start timecode."""
    return alt_timecode if alt_timecode is not None else start_timecode


def resolve_frame_rate(
    start_timecode: Timecode | None, nominal_frame_rate: float | None
) -> FrameRate | None:
    """Resolve the document frame rate.

    The device start timecode sets the rate; altTimecode is a user label and
    does not. Without a start timecode the rate is estimated from the nominal
    ``xmpDM:videoFrameRate``.
    """
    if start_timecode is not None:
        return start_timecode.frame_rate
    if nominal_frame_rate is None:
        return None
    return FrameRate.from_fps(nominal_frame_rate)


class XMPMetadata(BaseModel):
    """Production metadata from an XMP Dynamic Media packet.

    Every field is optional: XMP writers include whatever they know and
    nothing else. Two records compare equal when their timing and media
    description agree; provenance fields (title, creator tool, create date,
    start time scale/sample size) and the source document are ignored.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Parsed document the record was built from
    document: etree._Element | None = Field(default=None, exclude=True, repr=False)

    title: str | None = None
    creator_tool: str | None = None
    create_date: str | None = None  # verbatim, e.g. 2021-12-04T22:13:58Z

    nominal_frame_rate: float | None = None
    audio_sample_rate: float | None = None
    audio_channel_type: str | None = None
    video_frame_size: VideoFrameSize | None = None
    video_field_order: str | None = None

    start_timecode: Timecode | None = None
    alt_timecode: Timecode | None = None
    start_time_scale: int | None = None
    start_time_sample_size: int | None = None
    duration: float | None = None  # seconds

    track_name: str | None = None
    track_type: str | None = None
    markers: tuple[Marker, ...] = ()

    @model_validator(mode="after")
    def check_marker_rate(self) -> XMPMetadata:
        if not self.markers:
            return self
        frame_rate = self.frame_rate
        if frame_rate is None:
            raise ValueError("markers require a resolvable document frame rate")
        for marker in self.markers:
            if marker.frame_rate != frame_rate:
                raise ValueError(
                    f"marker {marker.name!r} is at {marker.frame_rate.value} fps, "
                    f"document is at {frame_rate.value} fps"
                )
        return self

    @property
    def frame_rate(self) -> FrameRate | None:
        """Return the resolved document frame rate."""
        return resolve_frame_rate(self.start_timecode, self.nominal_frame_rate)

    @property
    def start_timecode_resolved(self) -> Timecode | None:
        """Return altTimecode if set, else startTimecode."""
        return resolve_start_timecode(self.start_timecode, self.alt_timecode)

    @property
    def duration_formatted(self) -> str:
        """Return duration as human-readable string."""
        if self.duration is None:
            return "N/A"
        duration = self.duration
        if duration < 60:
            return f"{duration:.2f}s"
        minutes = int(duration // 60)
        seconds = duration % 60
        if minutes < 60:
            return f"{minutes}m {seconds:.1f}s"
        hours = minutes // 60
        minutes = minutes % 60
        return f"{hours}h {minutes}m {seconds:.0f}s"

    @property
    def has_markers(self) -> bool:
        """Check if any markers were found."""
        return bool(self.markers)

    def _equality_key(self) -> tuple[Any, ...]:
        return (
            self.frame_rate,
            self.markers,
            self.nominal_frame_rate,
            self.audio_sample_rate,
            self.audio_channel_type,
            self.video_frame_size,
            self.video_field_order,
            self.start_timecode_resolved,
            self.track_name,
            self.track_type,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XMPMetadata):
            return NotImplemented
        return self._equality_key() == other._equality_key()

    def __hash__(self) -> int:
        return hash(self._equality_key())

    # Entry points

    @classmethod
    def from_document(cls, root: etree._Element) -> XMPMetadata:
        """Build a record from an already parsed XMP tree."""
        from xmpdm.reader import read_document

        return read_document(root)

    @classmethod
    def from_xml(cls, xml: str | bytes) -> XMPMetadata:
        """Build a record from an XMP XML string."""
        from xmpdm.reader import read_xml

        return read_xml(xml)

    @classmethod
    def from_path(cls, path: str, config: XmpdmConfig | None = None) -> XMPMetadata:
        """Build a record from the XMP packet embedded in a file."""
        from xmpdm.reader import read_file

        return read_file(path, config=config)

    @classmethod
    def from_url(cls, url: str, config: XmpdmConfig | None = None) -> XMPMetadata:
        """Build a record from a file or HTTP(S) URL."""
        from xmpdm.reader import read_url

        return read_url(url, config=config)
