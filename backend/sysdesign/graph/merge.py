import itertools
import time
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple

from sysdesign.graph.layout import grid_position
from sysdesign.graph.matcher import DEFAULT_RESOLVER, NodeResolver
from sysdesign.graph.normalize import normalize_type
from sysdesign.graph.types import (
    Diagram,
    Edge,
    Node,
    NodeData,
    Position,
    ProposedComponent,
    ProposedConnection,
)

FALLBACK_COMPONENT_NAME = "Component"


class IdFactory:
    """
    Mints "<prefix>-<epoch ms>-<sequence>" ids.
    The sequence is shared by every factory in the process, so two ids
    minted in the same millisecond still differ.
    """

    _sequence = itertools.count()

    def __init__(self, clock=time.time):
        self._clock = clock

    def node_id(self) -> str:
        return self._mint("node")

    def edge_id(self) -> str:
        return self._mint("edge")

    def _mint(self, prefix: str) -> str:
        millis = int(self._clock() * 1000)
        return f"{prefix}-{millis}-{next(IdFactory._sequence)}"


# -------------------------
# Proposal coercion
# -------------------------

def _as_component(item) -> Optional[ProposedComponent]:
    if isinstance(item, ProposedComponent):
        return item
    if isinstance(item, dict):
        return ProposedComponent.from_dict(item)
    return None


def _as_connection(item) -> Optional[ProposedConnection]:
    if isinstance(item, ProposedConnection):
        return item
    if isinstance(item, dict):
        return ProposedConnection.from_dict(item)
    return None


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def _component_name(component: ProposedComponent) -> str:
    return (
        _text(component.name)
        or _text(component.type)
        or FALLBACK_COMPONENT_NAME
    )


# -------------------------
# Merge
# -------------------------

def merge_proposals(
    components: Iterable,
    connections: Iterable,
    current_nodes: Sequence[Node],
    current_edges: Sequence[Edge],
    resolver: Optional[NodeResolver] = None,
    id_factory: Optional[IdFactory] = None,
) -> Tuple[List[Node], List[Edge]]:
    """
    Reconcile proposed components/connections against the current diagram.

    1. Each component is resolved against current_nodes. A match keeps its
       id, position, label and color and takes the proposal's type and
       description; only the first proposal that reaches a node refreshes
       it. Otherwise a new id is minted and the node is placed on the grid by
       its ordinal among the batch's new components.
    2. Each connection resolves both ends against the nodes from step 1.
       Connections with an unresolved end are dropped.
    3. Resolved nodes replace same-id nodes in place or are appended.
       Edges are appended unless their (source, target) pair exists.

    Inputs are not mutated. Malformed items are defaulted or skipped;
    the batch never fails as a whole.
    """
    resolver = resolver or DEFAULT_RESOLVER
    ids = id_factory or IdFactory()

    # -------------------------
    # Step 1: node resolution
    # -------------------------
    resolved: List[Node] = []
    refreshed = {}          # existing id -> node built for it in this batch
    created = 0

    for item in components or []:
        component = _as_component(item)
        if component is None:
            continue

        name = _component_name(component)
        node_type = normalize_type(component.type)
        description = _text(component.description) or None

        existing = resolver.resolve(name, current_nodes)
        if existing is None:
            resolved.append(
                Node(
                    id=ids.node_id(),
                    position=grid_position(created),
                    data=NodeData(label=name, type=node_type, description=description),
                )
            )
            created += 1
            continue

        # Only the first proposal that lands on a node refreshes it
        node = refreshed.get(existing.id)
        if node is None:
            node = Node(
                id=existing.id,
                position=Position(existing.position.x, existing.position.y),
                data=replace(
                    existing.data,
                    type=node_type,
                    description=description or existing.data.description,
                ),
            )
            refreshed[existing.id] = node
        resolved.append(node)

    # -------------------------
    # Step 2: edge resolution
    # -------------------------
    seen_pairs = {(e.source, e.target) for e in current_edges}
    new_edges: List[Edge] = []
    dropped = 0

    for item in connections or []:
        connection = _as_connection(item)
        if connection is None:
            dropped += 1
            continue

        source = resolver.resolve(connection.from_name, resolved)
        target = resolver.resolve(connection.to_name, resolved)
        if source is None or target is None:
            dropped += 1
            continue

        pair = (source.id, target.id)
        if pair in seen_pairs:
            continue
        seen_pairs.add(pair)

        new_edges.append(
            Edge(
                id=ids.edge_id(),
                source=source.id,
                target=target.id,
                label=_text(connection.description) or None,
            )
        )

    # -------------------------
    # Step 3: fold into diagram
    # -------------------------
    merged_nodes = list(current_nodes)
    index_by_id = {node.id: i for i, node in enumerate(merged_nodes)}

    for node in resolved:
        if node.id in index_by_id:
            merged_nodes[index_by_id[node.id]] = node
        else:
            index_by_id[node.id] = len(merged_nodes)
            merged_nodes.append(node)

    merged_edges = list(current_edges) + new_edges

    print(
        f"[Merge] nodes: {created} created, {len(refreshed)} updated | "
        f"edges: {len(new_edges)} added, {dropped} dropped"
    )

    return merged_nodes, merged_edges


def merge_into_diagram(
    diagram: Diagram,
    components: Iterable,
    connections: Iterable,
    resolver: Optional[NodeResolver] = None,
    id_factory: Optional[IdFactory] = None,
) -> Diagram:
    nodes, edges = merge_proposals(
        components,
        connections,
        diagram.nodes,
        diagram.edges,
        resolver=resolver,
        id_factory=id_factory,
    )
    return Diagram(nodes=nodes, edges=edges)
