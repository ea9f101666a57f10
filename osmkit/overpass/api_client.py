"""
Overpass API client

Handles communication with Overpass API including:
- Query templating
- Timeouts
- Error handling
"""

from enum import Enum
from typing import Optional

import requests
from loguru import logger

from ..config import get_config, ClientConfig
from ..exceptions import TransportError


QUERY_TEMPLATE = "[out:{out}];{query}out {verbosity};"


class ResponseFormat(str, Enum):
    """Output formats understood by Overpass [out:...]"""
    GEOJSON = "geojson"
    JSON = "json"
    XML = "xml"
    CSV = "csv"


class OverpassClient:
    """Client for interacting with Overpass API"""
    
    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[int] = None,
        config: Optional[ClientConfig] = None
    ):
        self.config = config or get_config()
        self.url = url or self.config.overpass.url
        self.timeout = timeout if timeout is not None else self.config.overpass.timeout
    
    @staticmethod
    def construct_ql_query(query: str, response_format: ResponseFormat, verbosity: str) -> str:
        """
        Wrap a bare query statement into a complete Overpass QL request
        
        A missing trailing ';' is appended to the statement.
        
        Example:
            construct_ql_query('node["a"="b"]', ResponseFormat.XML, "body")
            -> '[out:xml];node["a"="b"];out body;'
        """
        ql_query = query.strip()
        if not ql_query.endswith(";"):
            ql_query += ";"
        return QUERY_TEMPLATE.format(
            out=ResponseFormat(response_format).value,
            query=ql_query,
            verbosity=verbosity
        )
    
    def get(
        self,
        query: str,
        response_format: ResponseFormat = ResponseFormat.XML,
        verbosity: Optional[str] = None,
        pure_query: bool = True
    ) -> str:
        """
        Execute an Overpass query
        
        Args:
            query: Overpass QL statement, or a complete request if pure_query is False
            response_format: Output format used when wrapping the query
            verbosity: Output verbosity used when wrapping (body, skel, ids, meta, ...)
            pure_query: Wrap `query` into the [out:...] template before sending
            
        Returns:
            Raw response body, whatever the HTTP status
            
        Raises:
            TransportError: On timeout or connection failure
        """
        verbosity = verbosity or self.config.overpass.verbosity
        if pure_query:
            full_query = self.construct_ql_query(query, response_format, verbosity)
        else:
            full_query = query
        
        logger.debug(f"Full query: {full_query}")
        
        headers = {"User-Agent": self.config.user_agent}
        try:
            response = requests.post(
                self.url,
                data=full_query.encode("utf-8"),
                headers=headers,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Overpass API failed: timeout after {self.timeout}s")
            raise TransportError(f"Overpass API timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Overpass API failed: {e}")
            raise TransportError(f"Overpass API request failed: {e}") from e
        
        if response.ok:
            logger.debug(f"Overpass returned {len(response.content)} bytes")
        elif response.status_code >= 500:
            logger.warning(f"Overpass server error: HTTP {response.status_code}")
        else:
            logger.warning(f"Overpass returned unexpected status: HTTP {response.status_code}")
        
        return response.text
