"""
Overpass API access

- API client: query templating and a single POST per query
"""

from .api_client import OverpassClient, ResponseFormat, QUERY_TEMPLATE

__all__ = [
    "OverpassClient",
    "ResponseFormat",
    "QUERY_TEMPLATE",
]
