"""Tests for URL sources."""

import httpx
import pytest

from xmpdm import XMPFetchError, XMPMetadata, XMPNotFoundError, read_url
from xmpdm.config import HTTPConfig, XmpdmConfig
from xmpdm.utils import URLKind, classify_url, fetch_bytes, url_to_path


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.mark.parametrize(
    "url,expected",
    [
        ("/media/clip.mov", URLKind.LOCAL),
        ("clip.mov", URLKind.LOCAL),
        ("file:///media/clip.mov", URLKind.LOCAL),
        ("C:\\media\\clip.mov", URLKind.LOCAL),
        ("http://example.com/clip.mp4", URLKind.HTTP),
        ("HTTPS://example.com/clip.mp4", URLKind.HTTP),
        ("ftp://example.com/clip.mp4", URLKind.UNSUPPORTED),
        ("s3://bucket/clip.mp4", URLKind.UNSUPPORTED),
    ],
)
def test_classify_url(url, expected):
    """Test URL classification."""
    assert classify_url(url) == expected


def test_url_to_path():
    """Test file URLs become paths and paths pass through."""
    assert url_to_path("file:///media/clip%20one.mov") == "/media/clip one.mov"
    assert url_to_path("/media/clip.mov") == "/media/clip.mov"


class TestFetchBytes:
    """Test fetch_bytes."""

    def test_success(self):
        """Test a successful download."""
        client = mock_client(lambda request: httpx.Response(200, content=b"payload"))
        assert fetch_bytes("https://example.com/clip.mp4", client=client) == b"payload"

    def test_http_error(self):
        """Test non-success status codes raise XMPFetchError."""
        client = mock_client(lambda request: httpx.Response(404))
        with pytest.raises(XMPFetchError) as exc_info:
            fetch_bytes("https://example.com/missing.mp4", client=client)
        assert exc_info.value.reason == "HTTP 404"
        assert exc_info.value.url == "https://example.com/missing.mp4"

    def test_transport_error(self):
        """Test connection failures raise XMPFetchError."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(XMPFetchError, match="connection refused"):
            fetch_bytes("https://example.com/clip.mp4", client=mock_client(handler))

    def test_size_ceiling(self):
        """Test downloads stop at the configured size."""
        client = mock_client(lambda request: httpx.Response(200, content=b"x" * (3 * 1024 * 1024)))
        data = fetch_bytes(
            "https://example.com/clip.mp4", HTTPConfig(max_download_mb=1), client=client
        )
        assert len(data) == 1024 * 1024

    def test_passed_client_left_open(self):
        """Test a caller's client is not closed."""
        client = mock_client(lambda request: httpx.Response(200, content=b"payload"))
        fetch_bytes("https://example.com/clip.mp4", client=client)
        assert client.is_closed is False


class TestReadUrl:
    """Test read_url."""

    def test_file_url(self, tmp_path, premiere_packet):
        """Test file:// URLs are read from disk."""
        path = tmp_path / "clip.jpg"
        path.write_bytes(premiere_packet)
        metadata = read_url(path.as_uri())
        assert metadata.title == "HELLO"
        assert XMPMetadata.from_url(path.as_uri()) == metadata

    def test_plain_path(self, tmp_path, premiere_packet):
        """Test plain paths are accepted."""
        path = tmp_path / "clip.jpg"
        path.write_bytes(premiere_packet)
        assert read_url(str(path)).creator_tool.startswith("Adobe Premiere Pro")

    def test_http(self, premiere_packet):
        """Test a remote file is downloaded and scanned."""
        requested = []

        def handler(request):
            requested.append(str(request.url))
            return httpx.Response(200, content=b"\0" * 512 + premiere_packet + b"\0" * 512)

        metadata = read_url("https://example.com/clip.mp4", client=mock_client(handler))
        assert requested == ["https://example.com/clip.mp4"]
        assert str(metadata.start_timecode_resolved) == "10:00:00:00"
        assert len(metadata.markers) == 3

    def test_http_without_xmp(self):
        """Test a remote file without a packet."""
        client = mock_client(lambda request: httpx.Response(200, content=b"\0" * 512))
        with pytest.raises(XMPNotFoundError):
            read_url("https://example.com/clip.mp4", client=client)

    def test_http_packet_past_ceiling(self, premiere_packet):
        """Test a packet beyond the download ceiling is not found."""
        content = b"\0" * (2 * 1024 * 1024) + premiere_packet
        client = mock_client(lambda request: httpx.Response(200, content=content))
        config = XmpdmConfig(http=HTTPConfig(max_download_mb=1))
        with pytest.raises(XMPNotFoundError):
            read_url("https://example.com/clip.mp4", config=config, client=client)

    def test_http_error(self):
        """Test HTTP errors propagate as XMPFetchError."""
        client = mock_client(lambda request: httpx.Response(500))
        with pytest.raises(XMPFetchError, match="HTTP 500"):
            read_url("https://example.com/clip.mp4", client=client)

    def test_unsupported_scheme(self):
        """Test unsupported schemes raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported URL scheme"):
            read_url("ftp://example.com/clip.mp4")
