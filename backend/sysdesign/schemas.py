from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from sysdesign.graph.types import Diagram

Number = Union[int, float]


class PositionModel(BaseModel):
    x: Number
    y: Number


class NodeDataModel(BaseModel):
    label: str
    type: str = "server"
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class NodeModel(BaseModel):
    id: str
    position: PositionModel
    data: NodeDataModel


class EdgeModel(BaseModel):
    id: str
    source: str
    target: str
    label: Optional[str] = None


class DiagramRequest(BaseModel):
    """Every request carries the caller's current diagram."""
    nodes: List[NodeModel] = Field(default_factory=list)
    edges: List[EdgeModel] = Field(default_factory=list)

    def to_diagram(self) -> Diagram:
        return Diagram.from_dict(
            {
                "nodes": [n.model_dump(exclude_none=True) for n in self.nodes],
                "edges": [e.model_dump(exclude_none=True) for e in self.edges],
            }
        )


class GenerateRequest(DiagramRequest):
    prompt: str


class ParseRequest(DiagramRequest):
    text: str


class MergeRequest(DiagramRequest):
    """A structured payload the caller already holds"""
    payload: Dict[str, Any]


class AddNodeRequest(DiagramRequest):
    label: str
    type: str = "server"
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class UpdateNodeRequest(DiagramRequest):
    node_id: str
    label: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class MoveNodeRequest(DiagramRequest):
    node_id: str
    position: PositionModel


class DeleteNodeRequest(DiagramRequest):
    node_id: str


class DeleteEdgeRequest(DiagramRequest):
    edge_id: str


class ImportRequest(BaseModel):
    snapshot: Dict[str, Any]
