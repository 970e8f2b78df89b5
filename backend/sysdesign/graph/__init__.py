# Graph core: data model, matching, type normalisation, layout and merge

from sysdesign.graph.types import (
    Diagram,
    Edge,
    Node,
    NodeData,
    Position,
    ProposedComponent,
    ProposedConnection,
)
from sysdesign.graph.matcher import find_node
from sysdesign.graph.normalize import NODE_TYPES, normalize_type
from sysdesign.graph.layout import grid_position
from sysdesign.graph.merge import IdFactory, merge_into_diagram, merge_proposals

__all__ = [
    "Diagram",
    "Edge",
    "Node",
    "NodeData",
    "Position",
    "ProposedComponent",
    "ProposedConnection",
    "find_node",
    "NODE_TYPES",
    "normalize_type",
    "grid_position",
    "IdFactory",
    "merge_into_diagram",
    "merge_proposals",
]
