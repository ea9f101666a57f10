"""
OSM editing API session

Handles communication with the OSM API including:
- Basic authentication
- Changeset lifecycle (create, close)
- Collecting node edits into an osmChange document
"""

import xml.etree.ElementTree as ET
from typing import Optional

import requests
from loguru import logger

from ..config import get_config, ClientConfig
from ..exceptions import (
    ChangesetIdNotSetError,
    HttpStatusError,
    InvalidChangesetIdError,
    TransportError,
)
from .changeset import OsmChange
from .parser import parse_response
from .urls import create_url


def _headers(config: ClientConfig) -> dict:
    return {"User-Agent": config.user_agent}


def get(devel: bool, sub_url: str, config: Optional[ClientConfig] = None) -> ET.Element:
    """
    Fetch and parse an unauthenticated API resource

    Args:
        devel: Use the development API host
        sub_url: Path below the versioned API root, e.g. "node/123"
        config: Client configuration (defaults to global config)

    Returns:
        Root element of the XML response

    Raises:
        HttpStatusError: If the server does not answer 200
        XmlParseError: If the body is not well-formed XML
        TransportError: On connection failures
    """
    config = config or get_config()
    url = create_url(devel, sub_url, config.osm)
    logger.debug(f"GET {url}")
    try:
        response = requests.get(url, headers=_headers(config))
    except requests.exceptions.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}") from e

    if response.status_code != 200:
        logger.error(f"OSM API failed: HTTP {response.status_code} for {url}")
        raise HttpStatusError(response.status_code, url)
    return parse_response(response.text)


class OsmSession:
    """
    Authenticated session against the OSM editing API

    Usage:
        session = OsmSession("user", "secret", devel=True)
        session.create_changeset("Add benches")
        session.add_create_node_changeset(OSMNode(-1, 51.5, -0.1, {"amenity": "bench"}).to_element())
        session.write_changeset_to_file("benches.osc")

    Not thread safe; use one session per owner.
    """

    def __init__(
        self,
        username: str,
        password: str,
        devel: bool = False,
        author: Optional[str] = None,
        config: Optional[ClientConfig] = None
    ):
        self.config = config or get_config()
        self.username = username
        self.password = password
        self.devel = devel
        self._changeset_id = ""
        self.changeset = OsmChange(author=author, osm_config=self.config.osm)

    # ============================================================
    # Changeset document
    # ============================================================

    def changeset_id(self) -> str:
        """
        Id of the changeset created by create_changeset

        Raises:
            ChangesetIdNotSetError: If no changeset has been created yet
        """
        if not self._changeset_id:
            raise ChangesetIdNotSetError("No changeset created yet, call create_changeset() first")
        return self._changeset_id

    def add_create_node_changeset(self, node: ET.Element) -> None:
        """Add a node to create, stamped with the current changeset and version 1"""
        self.changeset.add_create(node, self.changeset_id())

    def add_modify_node_changeset(self, node: ET.Element, version: str) -> None:
        """Add a node to modify; `version` is the last version known to the server"""
        self.changeset.add_modify(node, self.changeset_id(), version)

    def changeset_xml(self) -> str:
        """osmChange document as text, e.g. as an upload body"""
        return self.changeset.to_string()

    def write_changeset_to_file(self, path: str) -> None:
        """Write the osmChange document to `path` (overwrites)"""
        self.changeset.write(path)

    # ============================================================
    # Network operations
    # ============================================================

    def _put(self, sub_url: str, body: str) -> requests.Response:
        url = create_url(self.devel, sub_url, self.config.osm)
        headers = _headers(self.config)
        headers["Content-Type"] = "text/xml; charset=utf-8"
        logger.debug(f"PUT {url}")
        try:
            response = requests.put(
                url,
                data=body.encode("utf-8"),
                auth=(self.username, self.password),
                headers=headers
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"PUT {url} failed: {e}") from e

        if not response.ok:
            logger.warning(f"PUT {url} returned HTTP {response.status_code}")
        return response

    def put(self, sub_url: str, body: str) -> str:
        """
        Authenticated PUT, returning the raw response text

        Non-success statuses are logged and returned like any other body;
        only transport failures raise.

        Raises:
            TransportError: On connection failures
        """
        return self._put(sub_url, body).text

    def put_xml(self, sub_url: str, body: str) -> ET.Element:
        """PUT and parse the response as XML"""
        return parse_response(self.put(sub_url, body))

    def get(self, sub_url: str) -> ET.Element:
        """Unauthenticated GET against this session's API host"""
        return get(self.devel, sub_url, self.config)

    def create_changeset(self, comment: str) -> str:
        """
        Open a changeset on the server and remember its id

        Session state only changes when the server returns a valid id.
        See https://wiki.openstreetmap.org/wiki/API_v0.6#Create:_PUT_/api/0.6/changeset/create

        Args:
            comment: Changeset comment

        Returns:
            The new changeset id

        Raises:
            TransportError: On connection failures
            InvalidChangesetIdError: If the response is not a numeric id
        """
        osm = ET.Element("osm")
        changeset = ET.SubElement(osm, "changeset")
        ET.SubElement(changeset, "tag", {"k": "created_by", "v": self.config.osm.generator})
        ET.SubElement(changeset, "tag", {"k": "comment", "v": comment})
        body = ET.tostring(osm, encoding="unicode")

        try:
            response = self.put("changeset/create", body)
        except TransportError as e:
            logger.error(f"Changeset creation failed: {e}")
            raise

        changeset_id = response.strip()
        if not changeset_id.isdigit():
            logger.error(f"Changeset creation failed: unexpected response {response[:200]!r}")
            raise InvalidChangesetIdError(f"Server did not return a changeset id: {response[:200]!r}")

        self._changeset_id = changeset_id
        logger.info(f"Created changeset {changeset_id}")
        return changeset_id

    def close_changeset(self) -> str:
        """
        Close the current changeset on the server

        The id is kept so the document can still be written out.

        Raises:
            ChangesetIdNotSetError: If no changeset has been created yet
            TransportError: On connection failures
        """
        changeset_id = self.changeset_id()
        response = self._put(f"changeset/{changeset_id}/close", "")
        if response.ok:
            logger.info(f"Closed changeset {changeset_id}")
        return response.text
