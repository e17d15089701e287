"""Locating XMP packets inside container files."""

from __future__ import annotations

import logging
import mmap
import os
import struct
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from xmpdm.config import ScanConfig

logger = logging.getLogger(__name__)

# MP4/MOV file extensions
MP4_EXTENSIONS = [".mp4", ".m4v", ".m4a", ".mov", ".3gp", ".3g2"]

# uuid box type carrying XMP in ISO base media files
XMP_UUID = bytes.fromhex("BE7ACFCB97A942E89C71999491E3AFAC")

# Box paths that can hold an XMP packet, as sequences of box types
XMP_BOX_PATHS = [
    ("moov", "udta", "XMP_"),
]

# (start marker, end marker) pairs tried in order; the end marker is
# included in the packet up to the next '>'
PACKET_MARKERS = [
    (b"<?xpacket begin=", b"<?xpacket end="),
    (b"<x:xmpmeta", b"</x:xmpmeta"),
    (b"<rdf:RDF", b"</rdf:RDF"),
]


def iter_boxes(f: BinaryIO, start: int, end: int) -> Iterator[tuple[str, int, int]]:
    """Iterate over the boxes between two file offsets.

    Yields:
        Tuples of (box type, payload offset, box end offset)
    """
    pos = start
    while pos + 8 <= end:
        f.seek(pos)
        header = f.read(8)
        if len(header) < 8:
            return

        size, box_type_bytes = struct.unpack(">I4s", header)
        box_type = box_type_bytes.decode("latin-1")
        payload = pos + 8

        # Handle extended size
        if size == 1:
            ext_size = f.read(8)
            if len(ext_size) < 8:
                return
            size = struct.unpack(">Q", ext_size)[0]
            payload += 8
        elif size == 0:
            size = end - pos

        if size < payload - pos or pos + size > end:
            return

        yield box_type, payload, pos + size
        pos += size


def find_xmp_box(path: str) -> bytes | None:
    """Read the XMP payload of an MP4/MOV file from its box structure.

    Args:
        path: Path to the media file

    Returns:
        Raw XMP bytes, or None if no XMP box exists
    """
    with open(path, "rb") as f:
        f.seek(0, os.SEEK_END)
        file_size = f.tell()

        for box_type, payload, box_end in iter_boxes(f, 0, file_size):
            if box_type == "uuid" and box_end - payload >= 16:
                f.seek(payload)
                if f.read(16) == XMP_UUID:
                    return f.read(box_end - payload - 16)

        for box_path in XMP_BOX_PATHS:
            data = _read_box_path(f, 0, file_size, box_path)
            if data is not None:
                return data
    return None


def _read_box_path(f: BinaryIO, start: int, end: int, box_path: tuple[str, ...]) -> bytes | None:
    head, rest = box_path[0], box_path[1:]
    for box_type, payload, box_end in iter_boxes(f, start, end):
        if box_type != head:
            continue
        if not rest:
            f.seek(payload)
            return f.read(box_end - payload)
        found = _read_box_path(f, payload, box_end, rest)
        if found is not None:
            return found
    return None


def find_xmp_packet(data: bytes | mmap.mmap) -> bytes | None:
    """Find the first XMP packet in a block of bytes.

    Args:
        data: File contents (bytes or a memory map)

    Returns:
        Packet bytes including its wrapper, or None if no packet was found
    """
    for start_marker, end_marker in PACKET_MARKERS:
        start = data.find(start_marker)
        if start == -1:
            continue
        end = data.find(end_marker, start)
        if end == -1:
            continue
        close = data.find(b">", end)
        if close == -1:
            continue
        return bytes(data[start : close + 1])
    return None


def scan_file(path: str) -> bytes | None:
    """Scan a whole file for an XMP packet."""
    with open(path, "rb") as f:
        f.seek(0, os.SEEK_END)
        if f.tell() == 0:
            return None
        with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as data:
            return find_xmp_packet(data)


def sidecar_paths(path: str, extension: str = ".xmp") -> list[Path]:
    """Return candidate sidecar locations for a media file.

    Both ``clip.xmp`` and ``clip.mov.xmp`` naming schemes are used in the wild.
    """
    media = Path(path)
    if media.suffix.lower() == extension.lower():
        return []
    return [media.with_suffix(extension), media.with_name(media.name + extension)]


def read_xmp_packet(path: str, scan: ScanConfig | None = None) -> bytes | None:
    """Locate the XMP packet for a file.

    Tries, in order: the MP4/MOV XMP box, a scan of the file contents, and
    a sidecar file next to it.

    Args:
        path: Path to the media or sidecar file
        scan: Scan configuration (defaults used when omitted)

    Returns:
        Raw packet bytes, or None if no packet was found
    """
    scan = scan or ScanConfig()

    if Path(path).suffix.lower() in MP4_EXTENSIONS:
        data = find_xmp_box(path)
        if data is not None:
            logger.debug(f"Found XMP box in {path}")
            # The box payload may carry padding around the packet
            return find_xmp_packet(data) or data

    data = scan_file(path)
    if data is not None:
        logger.debug(f"Found XMP packet by scanning {path}")
        return data

    if scan.use_sidecar:
        for sidecar in sidecar_paths(path, scan.sidecar_extension):
            if sidecar.is_file():
                data = scan_file(str(sidecar))
                if data is not None:
                    logger.debug(f"Found XMP sidecar {sidecar}")
                    return data

    return None
