"""Utility functions for xmpdm."""

from .container import (
    MP4_EXTENSIONS,
    XMP_UUID,
    find_xmp_box,
    find_xmp_packet,
    read_xmp_packet,
    sidecar_paths,
)
from .timescale import parse_time_scale
from .url import URLKind, classify_url, fetch_bytes, url_to_path
from .xml import XMLNode, find_description, parse_xml

__all__ = [
    # XML
    "XMLNode",
    "parse_xml",
    "find_description",
    # Time
    "parse_time_scale",
    # Container parsing
    "find_xmp_box",
    "find_xmp_packet",
    "read_xmp_packet",
    "sidecar_paths",
    "MP4_EXTENSIONS",
    "XMP_UUID",
    # URLs
    "URLKind",
    "classify_url",
    "url_to_path",
    "fetch_bytes",
]
