"""
OSM API URL construction
"""

from typing import Optional
from urllib.parse import urljoin, urlparse

from ..config import get_config, OSMAPIConfig
from ..exceptions import UrlParseError


def _checked(url: str) -> str:
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise UrlParseError(f"Malformed URL {url!r}: {e}") from e
    if not parsed.scheme or not parsed.netloc:
        raise UrlParseError(f"Malformed URL {url!r}: scheme and host are required")
    return url


def create_url(devel: bool, sub_url: str, osm_config: Optional[OSMAPIConfig] = None) -> str:
    """
    Build the full API URL for a sub path
    
    Joins `api/`, `<api_version>/` and `sub_url` onto the development or
    production host with standard URL-join semantics, so `sub_url` must not
    start with a slash.
    
    Args:
        devel: Use the development (sandbox) host instead of production
        sub_url: Path below the versioned API root, e.g. "node/123"
        osm_config: OSM API settings (defaults to global config)
    
    Returns:
        Absolute URL string
    
    Raises:
        UrlParseError: If the base or the joined URL is malformed
    """
    osm_config = osm_config or get_config().osm
    base = osm_config.devel_api_url if devel else osm_config.api_url
    url = _checked(base)
    try:
        url = urljoin(url, "api/")
        url = urljoin(url, f"{osm_config.api_version}/")
        url = urljoin(url, sub_url)
    except ValueError as e:
        raise UrlParseError(f"Cannot join {sub_url!r} onto {base!r}: {e}") from e
    return _checked(url)
