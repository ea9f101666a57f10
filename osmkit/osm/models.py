"""
OSM data models

Data classes for representing OSM nodes as osmChange elements
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class OSMNode:
    """Represents an OSM node (point)"""
    id: int  # negative placeholder for nodes not yet on the server
    lat: float
    lon: float
    tags: Dict[str, str] = field(default_factory=dict)
    
    def to_element(self) -> ET.Element:
        """Build a <node> element with one <tag k v/> child per tag"""
        node = ET.Element("node", {
            "id": str(self.id),
            "lat": str(self.lat),
            "lon": str(self.lon),
        })
        for key, value in self.tags.items():
            ET.SubElement(node, "tag", {"k": key, "v": value})
        return node
    
    @classmethod
    def from_element(cls, element: ET.Element) -> "OSMNode":
        """Read a node from an API <node> element"""
        tags = {tag.get("k"): tag.get("v") for tag in element.findall("tag")}
        return cls(
            id=int(element.get("id")),
            lat=float(element.get("lat")),
            lon=float(element.get("lon")),
            tags=tags
        )
