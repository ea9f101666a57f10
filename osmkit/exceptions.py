"""
Exceptions raised by osmkit

Every error derives from OSMKitError and from the builtin exception
closest to its meaning, so callers can catch either.
"""

from typing import Optional


class OSMKitError(Exception):
    """Base class for all osmkit errors"""


class UrlParseError(OSMKitError, ValueError):
    """Base URL or sub path could not be parsed"""


class TransportError(OSMKitError, RuntimeError):
    """Connection failure or timeout before a response was received"""


class HttpStatusError(OSMKitError, RuntimeError):
    """Server answered with an unexpected HTTP status"""
    
    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        message = f"HTTP {status_code}"
        if url:
            message += f" for {url}"
        super().__init__(message)


class XmlParseError(OSMKitError, ValueError):
    """Response body is not well-formed XML"""


class ChangesetIdNotSetError(OSMKitError, RuntimeError):
    """No changeset has been created on the server yet"""


class InvalidChangesetIdError(OSMKitError, ValueError):
    """Server returned something that is not a changeset id"""


class ChangesetWriteError(OSMKitError, OSError):
    """osmChange document could not be written to disk"""
