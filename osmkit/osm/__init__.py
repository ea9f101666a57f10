"""
OpenStreetMap editing API module

Components:
- URLs: versioned API URL construction
- Parser: XML response parsing
- Models: Data structures (OSMNode)
- Changeset: osmChange document builder
- Session: Authenticated API session and changeset lifecycle
"""

from .changeset import OsmChange
from .models import OSMNode
from .parser import parse_response
from .session import OsmSession, get
from .urls import create_url

__all__ = [
    "OsmChange",
    "OSMNode",
    "OsmSession",
    "create_url",
    "get",
    "parse_response",
]
