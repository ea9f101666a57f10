"""
osmkit: thin clients for the OpenStreetMap editing API and the Overpass API
"""

from .config import get_config, validate_config, ClientConfig
from .exceptions import (
    OSMKitError,
    UrlParseError,
    TransportError,
    HttpStatusError,
    XmlParseError,
    ChangesetIdNotSetError,
    InvalidChangesetIdError,
    ChangesetWriteError,
)
from .osm import OsmSession, OsmChange, OSMNode, create_url
from .overpass import OverpassClient, ResponseFormat

__version__ = "0.1.0"

__all__ = [
    "get_config",
    "validate_config",
    "ClientConfig",
    "OSMKitError",
    "UrlParseError",
    "TransportError",
    "HttpStatusError",
    "XmlParseError",
    "ChangesetIdNotSetError",
    "InvalidChangesetIdError",
    "ChangesetWriteError",
    "OsmSession",
    "OsmChange",
    "OSMNode",
    "create_url",
    "OverpassClient",
    "ResponseFormat",
]
