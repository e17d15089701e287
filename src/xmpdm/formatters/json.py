"""JSON output formatter."""

import json
from typing import Any

from xmpdm.models import Timecode, XMPMetadata


def _timecode(timecode: Timecode | None) -> dict[str, Any] | None:
    if timecode is None:
        return None
    return {
        "value": str(timecode),
        "frame_rate": timecode.frame_rate.value,
        "frame_count": timecode.frame_count,
    }


def to_dict(metadata: XMPMetadata) -> dict[str, Any]:
    """Convert metadata to a JSON-ready dictionary.

    Derived properties (resolved frame rate and start timecode) are
    included, and timecodes are rendered as strings.

    Args:
        metadata: XMPMetadata object

    Returns:
        Dictionary representation
    """
    data = metadata.model_dump(mode="json")
    frame_rate = metadata.frame_rate
    data["frame_rate"] = frame_rate.value if frame_rate else None
    data["start_timecode"] = _timecode(metadata.start_timecode)
    data["alt_timecode"] = _timecode(metadata.alt_timecode)
    data["start_timecode_resolved"] = _timecode(metadata.start_timecode_resolved)
    return data


def format_json(metadata: XMPMetadata, indent: int = 2) -> str:
    """Format metadata as JSON string.

    Args:
        metadata: XMPMetadata object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return json.dumps(to_dict(metadata), indent=indent, ensure_ascii=False)


def format_json_list(metadata_list: list[XMPMetadata], indent: int = 2) -> str:
    """Format multiple metadata objects as JSON array.

    Args:
        metadata_list: List of XMPMetadata objects
        indent: JSON indentation level

    Returns:
        JSON array formatted string
    """
    data = [to_dict(m) for m in metadata_list]
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str)
