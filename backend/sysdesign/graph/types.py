from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Position:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Position":
        return cls(x=raw["x"], y=raw["y"])


@dataclass
class NodeData:
    label: str
    type: str = "server"            # one of NODE_TYPES
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None      # custom block icon, overrides the type icon

    def to_dict(self) -> dict:
        data = {"label": self.label, "type": self.type}
        if self.description is not None:
            data["description"] = self.description
        if self.color is not None:
            data["color"] = self.color
        if self.icon is not None:
            data["icon"] = self.icon
        return data

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "NodeData":
        return cls(
            label=raw["label"],
            type=raw.get("type", "server"),
            description=raw.get("description"),
            color=raw.get("color"),
            icon=raw.get("icon"),
        )


@dataclass
class Node:
    id: str
    position: Position
    data: NodeData

    @property
    def label(self) -> str:
        return self.data.label

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "position": self.position.to_dict(),
            "data": self.data.to_dict(),
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Node":
        return cls(
            id=raw["id"],
            position=Position.from_dict(raw["position"]),
            data=NodeData.from_dict(raw["data"]),
        )


@dataclass
class Edge:
    id: str
    source: str
    target: str
    label: Optional[str] = None     # connection description, if any

    def to_dict(self) -> dict:
        data = {"id": self.id, "source": self.source, "target": self.target}
        if self.label is not None:
            data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Edge":
        return cls(
            id=raw["id"],
            source=raw["source"],
            target=raw["target"],
            label=raw.get("label"),
        )


@dataclass
class Diagram:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def node_ids(self) -> set:
        return {node.id for node in self.nodes}

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Diagram":
        return cls(
            nodes=[Node.from_dict(n) for n in raw.get("nodes", [])],
            edges=[Edge.from_dict(e) for e in raw.get("edges", [])],
        )


# -------------------------
# Proposals (not persisted)
# -------------------------

@dataclass
class ProposedComponent:
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ProposedComponent":
        return cls(
            name=raw.get("name"),
            type=raw.get("type"),
            description=raw.get("description"),
        )


@dataclass
class ProposedConnection:
    from_name: Optional[str] = None
    to_name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ProposedConnection":
        return cls(
            from_name=raw.get("from"),
            to_name=raw.get("to"),
            description=raw.get("description"),
        )
