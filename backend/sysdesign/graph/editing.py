"""
Manual diagram edits (add / edit / move / delete / clear).

Every function returns a new Diagram; the input diagram is left untouched.
Unknown ids are not an error: the diagram comes back unchanged.
"""

from dataclasses import replace
from typing import Optional

from sysdesign.graph.layout import manual_position
from sysdesign.graph.merge import IdFactory
from sysdesign.graph.normalize import NODE_TYPES, normalize_type
from sysdesign.graph.types import Diagram, Node, NodeData, Position

EDITABLE_FIELDS = ("label", "type", "description", "color", "icon")


def manual_type(node_type) -> str:
    """A type picked from the palette is kept; free text goes through the rules."""
    if node_type in NODE_TYPES:
        return node_type
    return normalize_type(node_type)


def add_node(
    diagram: Diagram,
    label: str,
    node_type: str = "server",
    description: Optional[str] = None,
    color: Optional[str] = None,
    icon: Optional[str] = None,
    id_factory: Optional[IdFactory] = None,
) -> Diagram:
    ids = id_factory or IdFactory()
    node = Node(
        id=ids.node_id(),
        position=manual_position(),
        data=NodeData(
            label=label,
            type=manual_type(node_type),
            description=description,
            color=color,
            icon=icon,
        ),
    )
    return Diagram(nodes=list(diagram.nodes) + [node], edges=list(diagram.edges))


def update_node(diagram: Diagram, node_id: str, **changes) -> Diagram:
    """Partial update of node data; keys outside EDITABLE_FIELDS are ignored."""
    changes = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
    if "type" in changes:
        changes["type"] = manual_type(changes["type"])

    nodes = [
        replace(node, data=replace(node.data, **changes))
        if node.id == node_id
        else node
        for node in diagram.nodes
    ]
    return Diagram(nodes=nodes, edges=list(diagram.edges))


def move_node(diagram: Diagram, node_id: str, position: Position) -> Diagram:
    nodes = [
        replace(node, position=Position(position.x, position.y))
        if node.id == node_id
        else node
        for node in diagram.nodes
    ]
    return Diagram(nodes=nodes, edges=list(diagram.edges))


def delete_node(diagram: Diagram, node_id: str) -> Diagram:
    """Remove a node and every edge that starts or ends at it."""
    return Diagram(
        nodes=[n for n in diagram.nodes if n.id != node_id],
        edges=[
            e for e in diagram.edges
            if e.source != node_id and e.target != node_id
        ],
    )


def delete_edge(diagram: Diagram, edge_id: str) -> Diagram:
    return Diagram(
        nodes=list(diagram.nodes),
        edges=[e for e in diagram.edges if e.id != edge_id],
    )


def clear_diagram() -> Diagram:
    return Diagram()
