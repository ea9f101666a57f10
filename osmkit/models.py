"""
Pydantic models for batch node edits
Matches the JSON accepted by `cli.py changeset --input`
"""

from typing import List, Dict, Optional, Literal
from pydantic import BaseModel, Field, model_validator

from .osm.models import OSMNode


class NodeChange(BaseModel):
    action: Literal["create", "modify"]
    id: int  # negative placeholder for creations
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    tags: Dict[str, str] = Field(default_factory=dict)
    version: Optional[int] = None  # required for modify
    
    @model_validator(mode="after")
    def check_version(self) -> "NodeChange":
        if self.action == "modify" and self.version is None:
            raise ValueError(f"node {self.id}: modify requires a version")
        return self
    
    def to_node(self) -> OSMNode:
        return OSMNode(id=self.id, lat=self.lat, lon=self.lon, tags=dict(self.tags))


class ChangesetRequest(BaseModel):
    comment: Optional[str] = None
    nodes: List[NodeChange] = Field(default_factory=list)
