"""Exceptions raised by xmpdm entry points.

Field-level problems never raise: a property that is missing or does not
parse is left as ``None`` on the record. Only failing to obtain an XMP
payload at all is an error.
"""


class XMPError(Exception):
    """Base class for xmpdm errors."""


class XMPNotFoundError(XMPError):
    """No XMP packet could be located in the given source."""

    def __init__(self, source: str, message: str | None = None):
        self.source = source
        super().__init__(message or f"Failed to find an XMP chunk in: {source}")


class XMPFetchError(XMPError):
    """A remote XMP source could not be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")
