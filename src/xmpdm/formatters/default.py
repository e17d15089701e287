"""Default output formatter - sectioned report."""

from xmpdm.models import Marker, XMPMetadata


def _frame_rate_label(metadata: XMPMetadata) -> str:
    frame_rate = metadata.frame_rate
    if frame_rate is None:
        return "N/A"
    label = f"{float(frame_rate.fps):.3f}".rstrip("0").rstrip(".") + " fps"
    if frame_rate.is_drop:
        label += " drop-frame"
    if metadata.start_timecode is None:
        label += " (estimated)"
    return label


def _marker_line(index: int, marker: Marker) -> str:
    line = f"  {index:>3}. frame {marker.start_frame}"
    if marker.duration_frames:
        line += f" +{marker.duration_frames}"
    line += f" ({marker.start_seconds:.3f}s)"
    if marker.marker_type:
        line += f" [{marker.marker_type}]"
    if marker.name:
        line += f" {marker.name}"
    if marker.comment:
        line += f" - {marker.comment}"
    return line


def format_default(metadata: XMPMetadata, source: str = "") -> str:
    """Format metadata as a sectioned report.

    Sections are only printed when they have content:
    - Document: title, creator tool, create date
    - Video: frame rate, frame size, field order, duration
    - Audio: sample rate, channel type
    - Timecode: start, alternate and resolved timecodes
    - Track and markers
    """
    lines = []

    lines.append("=" * 70)
    lines.append(f"Source: {source or 'XMP'}")
    lines.append("=" * 70)

    if metadata.title or metadata.creator_tool or metadata.create_date:
        lines.append("")
        lines.append("## DOCUMENT")
        if metadata.title:
            lines.append(f"  Title:        {metadata.title}")
        if metadata.creator_tool:
            lines.append(f"  Creator Tool: {metadata.creator_tool}")
        if metadata.create_date:
            lines.append(f"  Created:      {metadata.create_date}")

    lines.append("")
    lines.append("## VIDEO")
    lines.append(f"  Frame Rate:   {_frame_rate_label(metadata)}")
    if metadata.nominal_frame_rate is not None:
        lines.append(f"  Nominal Rate: {metadata.nominal_frame_rate:g}")
    if metadata.video_frame_size:
        lines.append(f"  Frame Size:   {metadata.video_frame_size}")
    if metadata.video_field_order:
        lines.append(f"  Field Order:  {metadata.video_field_order}")
    lines.append(f"  Duration:     {metadata.duration_formatted}")

    if metadata.audio_sample_rate is not None or metadata.audio_channel_type:
        lines.append("")
        lines.append("## AUDIO")
        if metadata.audio_sample_rate is not None:
            khz = metadata.audio_sample_rate / 1000
            lines.append(f"  Sample Rate:  {khz:g} kHz")
        if metadata.audio_channel_type:
            lines.append(f"  Channels:     {metadata.audio_channel_type}")

    resolved = metadata.start_timecode_resolved
    if resolved is not None:
        lines.append("")
        lines.append("## TIMECODE")
        lines.append(f"  Start:        {resolved}")
        if metadata.alt_timecode is not None and metadata.start_timecode is not None:
            lines.append(f"  Device TC:    {metadata.start_timecode} (overridden)")
        if metadata.start_time_scale is not None:
            lines.append(f"  Time Scale:   {metadata.start_time_scale}")
        if metadata.start_time_sample_size is not None:
            lines.append(f"  Sample Size:  {metadata.start_time_sample_size}")

    if metadata.track_name or metadata.track_type:
        lines.append("")
        lines.append("## TRACK")
        if metadata.track_name:
            lines.append(f"  Name:         {metadata.track_name}")
        if metadata.track_type:
            lines.append(f"  Type:         {metadata.track_type}")

    if metadata.markers:
        lines.append("")
        lines.append(f"## MARKERS ({len(metadata.markers)})")
        for index, marker in enumerate(metadata.markers, start=1):
            lines.append(_marker_line(index, marker))

    lines.append("")
    lines.append("=" * 70)

    return "\n".join(lines)
