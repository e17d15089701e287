"""Entry points: build an XMPMetadata record from a tree, string, file or URL."""

from __future__ import annotations

import logging
import os

import httpx
from lxml import etree

from xmpdm.config import XmpdmConfig, get_config
from xmpdm.exceptions import XMPNotFoundError
from xmpdm.extractors import ExtractionContext, extract_fields
from xmpdm.models import XMPMetadata
from xmpdm.utils.container import find_xmp_packet, read_xmp_packet
from xmpdm.utils.url import URLKind, classify_url, fetch_bytes, url_to_path
from xmpdm.utils.xml import XMLNode, find_description, parse_xml

logger = logging.getLogger(__name__)


def read_document(root: etree._Element) -> XMPMetadata:
    """Build a record from a parsed XMP document.

    This is where every other entry point ends up. It does not raise:
    anything that cannot be read from the tree is left unset.

    Args:
        root: Root element (x:xmpmeta or rdf:RDF)

    Returns:
        XMPMetadata populated with every property that could be parsed
    """
    context = ExtractionContext(root=XMLNode(root), description=find_description(root))
    fields = extract_fields(context)
    return XMPMetadata(document=root, **fields)


def read_xml(xml: str | bytes) -> XMPMetadata:
    """Build a record from XMP XML text.

    Args:
        xml: XMP packet or sidecar contents

    Returns:
        XMPMetadata for the document

    Raises:
        XMPNotFoundError: If the input is blank
        lxml.etree.XMLSyntaxError: If the input is not well-formed XML
    """
    if not xml.strip():
        raise XMPNotFoundError("<xml string>", "No XMP content in empty input")
    return read_document(parse_xml(xml))


def read_file(path: str, config: XmpdmConfig | None = None) -> XMPMetadata:
    """Build a record from the XMP packet embedded in (or beside) a file.

    Args:
        path: Path to a media file or XMP sidecar
        config: Configuration (global configuration when omitted)

    Returns:
        XMPMetadata for the file

    Raises:
        FileNotFoundError: If the file does not exist
        XMPNotFoundError: If no XMP packet could be located
    """
    message = f"Failed to find an XMP chunk in the file: {path}"
    if not os.path.exists(path):
        raise FileNotFoundError(f"{message} (no such file)")

    config = config or get_config()
    packet = read_xmp_packet(path, config.scan)
    if packet is None:
        raise XMPNotFoundError(path, message)
    return read_xml(packet)


def read_url(
    url: str,
    config: XmpdmConfig | None = None,
    client: httpx.Client | None = None,
) -> XMPMetadata:
    """Build a record from a file:// or http(s):// URL.

    Local URLs are read like paths. Remote resources are downloaded (up to
    the configured size ceiling) and scanned for an XMP packet.

    Args:
        url: URL or path
        config: Configuration (global configuration when omitted)
        client: httpx client to fetch remote URLs with

    Returns:
        XMPMetadata for the resource

    Raises:
        ValueError: If the URL scheme is not supported
        XMPFetchError: If a remote resource cannot be downloaded
        XMPNotFoundError: If no XMP packet could be located
    """
    config = config or get_config()
    kind = classify_url(url)

    if kind == URLKind.LOCAL:
        return read_file(url_to_path(url), config=config)

    if kind == URLKind.HTTP:
        data = fetch_bytes(url, config.http, client=client)
        packet = find_xmp_packet(data)
        if packet is None:
            raise XMPNotFoundError(url)
        logger.debug(f"Found XMP packet in {len(data)} bytes from {url}")
        return read_xml(packet)

    raise ValueError(f"Unsupported URL scheme: {url}")


def read_files(paths: list[str], config: XmpdmConfig | None = None) -> list[XMPMetadata]:
    """Read several files, skipping (and logging) the ones that fail.

    Args:
        paths: List of file paths
        config: Configuration (global configuration when omitted)

    Returns:
        List of XMPMetadata objects, in input order
    """
    results = []
    for path in paths:
        try:
            results.append(read_file(path, config=config))
        except (OSError, XMPNotFoundError, etree.XMLSyntaxError) as e:
            logger.warning(f"Failed to read XMP from {path}: {e}")
    return results
