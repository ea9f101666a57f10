"""
osmChange document builder

Accumulates node creations and modifications for one changeset.
See https://wiki.openstreetmap.org/wiki/OsmChange
"""

import copy
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from ..config import get_config, OSMAPIConfig
from ..exceptions import ChangesetWriteError


class OsmChange:
    """
    In-memory osmChange document

    Holds at most one <create> and one <modify> group. A group is added the
    first time a node is inserted into it; later nodes are appended, so
    document order follows insertion order.

    Usage:
        change = OsmChange(author="me")
        change.add_create(node, changeset_id="42")
        change.write("changes.osc")
    """

    def __init__(self, author: Optional[str] = None, osm_config: Optional[OSMAPIConfig] = None):
        self.osm_config = osm_config or get_config().osm
        self.root = ET.Element("osmChange", {
            "version": self.osm_config.api_version,
            "generator": self.osm_config.generator,
            "date": datetime.now(timezone.utc).isoformat(),
            "author": author if author is not None else self.osm_config.author,
        })

    def _group(self, name: str) -> ET.Element:
        group = self.root.find(name)
        if group is None:
            group = ET.SubElement(self.root, name)
        return group

    def add_create(self, node: ET.Element, changeset_id: str) -> None:
        """Append a node to the <create> group with version 1"""
        node.set("changeset", changeset_id)
        node.set("version", "1")
        self._group("create").append(node)

    def add_modify(self, node: ET.Element, changeset_id: str, version: str) -> None:
        """
        Append a node to the <modify> group

        `version` must be the version currently known to the server,
        it is not checked here.
        """
        node.set("changeset", changeset_id)
        node.set("version", str(version))
        self._group("modify").append(node)

    @property
    def created(self):
        group = self.root.find("create")
        return list(group) if group is not None else []

    @property
    def modified(self):
        group = self.root.find("modify")
        return list(group) if group is not None else []

    def _pretty(self) -> ET.Element:
        # indent() rewrites text/tail, keep the live document untouched
        root = copy.deepcopy(self.root)
        ET.indent(root)
        return root

    def to_string(self) -> str:
        """Serialize the document as indented XML text"""
        return ET.tostring(self._pretty(), encoding="unicode")

    def write(self, path: str) -> None:
        """
        Write the document to `path`, replacing any existing file

        Raises:
            ChangesetWriteError: If the file cannot be written
        """
        tree = ET.ElementTree(self._pretty())
        try:
            tree.write(path, encoding="utf-8", xml_declaration=True)
        except OSError as e:
            raise ChangesetWriteError(f"Failed to write changeset to {path}: {e}") from e
        logger.info(f"Wrote osmChange ({len(self.created)} create, {len(self.modified)} modify) to {path}")
