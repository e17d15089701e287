"""Marker model."""

from pydantic import BaseModel, ConfigDict, Field

from .timecode import FrameRate, RationalTime


class Marker(BaseModel):
    """A frame-indexed marker.

    Markers in XMP only carry frame numbers, so the rate is inherited from
    the document they were found in.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    comment: str = ""
    start_frame: int
    duration_frames: int = Field(default=0, ge=0)
    frame_rate: FrameRate
    marker_type: str | None = None  # xmpDM:type - Comment, Chapter, Cue, ...

    @property
    def end_frame(self) -> int:
        """Return the first frame after the marker."""
        return self.start_frame + self.duration_frames

    @property
    def start_seconds(self) -> float:
        """Return marker start in seconds."""
        return RationalTime(self.start_frame, self.frame_rate.rate).to_seconds()

    @property
    def duration_seconds(self) -> float:
        """Return marker duration in seconds."""
        return RationalTime(self.duration_frames, self.frame_rate.rate).to_seconds()
