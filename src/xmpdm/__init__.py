"""xmpdm - XMP Dynamic Media metadata reader.

Read production metadata (frame rate, timecodes, markers, duration, track
info) that editors and cameras embed in media files as XMP.

Usage:
    from xmpdm import XMPMetadata

    # Read the XMP packet embedded in a file
    metadata = XMPMetadata.from_path("clip.mov")

    # Resolved start timecode (user-set altTimecode wins)
    if metadata.start_timecode_resolved:
        print(metadata.start_timecode_resolved, metadata.frame_rate)

    # Markers, in document order
    for marker in metadata.markers:
        print(marker.name, marker.start_seconds)
"""

from xmpdm._version import __version__
from xmpdm.config import XmpdmConfig, get_config, load_config
from xmpdm.exceptions import XMPError, XMPFetchError, XMPNotFoundError
from xmpdm.formatters import (
    format_default,
    format_json,
    format_json_list,
    format_quiet,
    to_dict,
)
from xmpdm.models import (
    FrameRate,
    Marker,
    TimeFormat,
    Timecode,
    VideoFrameSize,
    XMPMetadata,
)
from xmpdm.reader import read_document, read_file, read_files, read_url, read_xml

__all__ = [
    # Version
    "__version__",
    # Main functions
    "read_document",
    "read_xml",
    "read_file",
    "read_files",
    "read_url",
    # Models
    "XMPMetadata",
    "VideoFrameSize",
    "Marker",
    "Timecode",
    "TimeFormat",
    "FrameRate",
    # Errors
    "XMPError",
    "XMPNotFoundError",
    "XMPFetchError",
    # Config
    "XmpdmConfig",
    "get_config",
    "load_config",
    # Formatters
    "format_default",
    "format_quiet",
    "format_json",
    "format_json_list",
    "to_dict",
]
