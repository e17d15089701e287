"""URL resolution for XMP sources.

Supports:
- Local paths and file:// URLs (read from disk)
- http:// and https:// URLs (streamed with httpx)
"""

from __future__ import annotations

import logging
from enum import Enum
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

from xmpdm.config import HTTPConfig
from xmpdm.exceptions import XMPFetchError

logger = logging.getLogger(__name__)


class URLKind(str, Enum):
    """How a URL is read."""

    LOCAL = "local"
    HTTP = "http"
    UNSUPPORTED = "unsupported"


def classify_url(url: str) -> URLKind:
    """Classify a URL by the way it has to be read.

    Args:
        url: URL or plain filesystem path

    Returns:
        URLKind for the URL
    """
    scheme = urlparse(url).scheme.lower()
    # single letters are Windows drive letters, not schemes
    if scheme in ("", "file") or len(scheme) == 1:
        return URLKind.LOCAL
    if scheme in ("http", "https"):
        return URLKind.HTTP
    return URLKind.UNSUPPORTED


def url_to_path(url: str) -> str:
    """Convert a file:// URL (or plain path) into a filesystem path."""
    parsed = urlparse(url)
    if parsed.scheme.lower() != "file":
        return url
    return url2pathname(parsed.path)


def fetch_bytes(
    url: str,
    http: HTTPConfig | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    """Download a remote resource, up to the configured size ceiling.

    Args:
        url: http(s) URL
        http: HTTP configuration (defaults used when omitted)
        client: Client to use instead of a fresh one

    Returns:
        Downloaded bytes, truncated at the size ceiling

    Raises:
        XMPFetchError: On transport errors or non-success status codes
    """
    http = http or HTTPConfig()
    limit = http.max_download_bytes
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=http.timeout_seconds, follow_redirects=True)

    chunks: list[bytes] = []
    received = 0
    try:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                received += len(chunk)
                if received >= limit:
                    logger.debug(f"Stopped reading {url} at {received} bytes")
                    break
    except httpx.HTTPStatusError as e:
        raise XMPFetchError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise XMPFetchError(url, str(e) or type(e).__name__) from e
    finally:
        if owns_client:
            client.close()

    return b"".join(chunks)[:limit]
