"""Quiet output formatter - one-line summary."""

from xmpdm.models import XMPMetadata


def format_quiet(metadata: XMPMetadata, source: str = "") -> str:
    """Format metadata as one-line summary.

    Format: source | frame rate | start timecode | duration | N markers
    """
    parts = []

    parts.append(source or "XMP")

    # Frame rate
    frame_rate = metadata.frame_rate
    parts.append(f"{frame_rate.value} fps" if frame_rate else "N/A")

    # Start timecode
    timecode = metadata.start_timecode_resolved
    parts.append(str(timecode) if timecode else "N/A")

    parts.append(metadata.duration_formatted)

    parts.append(f"{len(metadata.markers)} markers")

    return " | ".join(parts)


def format_quiet_list(items: list[tuple[str, XMPMetadata]]) -> str:
    """Format multiple records as one-line summaries.

    Args:
        items: List of (source, XMPMetadata) pairs

    Returns:
        Multiple lines, one per record
    """
    return "\n".join(format_quiet(metadata, source) for source, metadata in items)
