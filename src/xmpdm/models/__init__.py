"""Pydantic models for xmpdm."""

from .marker import Marker
from .metadata import VideoFrameSize, XMPMetadata, resolve_frame_rate, resolve_start_timecode
from .timecode import FrameRate, TimeFormat, Timecode

__all__ = [
    # Main model
    "XMPMetadata",
    "VideoFrameSize",
    "resolve_frame_rate",
    "resolve_start_timecode",
    # Timing
    "FrameRate",
    "TimeFormat",
    "Timecode",
    "Marker",
]
