"""Graph merge engine: idempotence, id stability, no dangling edges."""

from sysdesign.graph.matcher import ExactResolver
from sysdesign.graph.merge import IdFactory, merge_into_diagram, merge_proposals
from sysdesign.graph.types import (
    Diagram,
    Edge,
    Node,
    NodeData,
    Position,
    ProposedComponent,
    ProposedConnection,
)

COMPONENTS = [
    {"name": "API Server", "type": "api-server"},
    {"name": "Database", "type": "database"},
]
CONNECTIONS = [{"from": "API", "to": "Database"}]


def assert_no_dangling(nodes, edges):
    ids = {n.id for n in nodes}
    for edge in edges:
        assert edge.source in ids
        assert edge.target in ids


def test_scenario_api_server_and_database_on_empty_diagram():
    nodes, edges = merge_proposals(COMPONENTS, CONNECTIONS, [], [])

    assert [n.label for n in nodes] == ["API Server", "Database"]
    assert nodes[0].position == Position(100, 100)
    assert nodes[1].position == Position(300, 100)
    assert nodes[0].data.type == "server"
    assert nodes[1].data.type == "database"

    assert len(edges) == 1
    assert edges[0].source == nodes[0].id
    assert edges[0].target == nodes[1].id
    assert_no_dangling(nodes, edges)


def test_remerge_is_idempotent():
    nodes, edges = merge_proposals(COMPONENTS, CONNECTIONS, [], [])
    nodes2, edges2 = merge_proposals(COMPONENTS, CONNECTIONS, nodes, edges)

    assert nodes2 == nodes
    assert edges2 == edges


def assert_remerge_is_idempotent(components, connections):
    nodes, edges = merge_proposals(components, connections, [], [])
    nodes2, edges2 = merge_proposals(components, connections, nodes, edges)

    assert [n.id for n in nodes2] == [n.id for n in nodes]
    assert [n.label for n in nodes2] == [n.label for n in nodes]
    assert [n.position for n in nodes2] == [n.position for n in nodes]
    assert nodes2 == nodes
    assert {(e.source, e.target) for e in edges2} == {(e.source, e.target) for e in edges}
    assert edges2 == edges


def test_remerge_with_overlapping_labels_is_idempotent():
    assert_remerge_is_idempotent(
        [{"name": "API Gateway"}, {"name": "API"}],
        [],
    )
    assert_remerge_is_idempotent(
        [
            {"name": "Payment API", "type": "payment", "description": "Charges cards"},
            {"name": "API", "type": "service"},
            {"name": "Database", "type": "database"},
        ],
        [
            {"from": "API", "to": "Database"},
            {"from": "Payment API", "to": "Database"},
        ],
    )


def test_remerge_with_repeated_names_is_idempotent():
    assert_remerge_is_idempotent(
        [
            {"name": "Cache", "type": "cache"},
            {"name": "Cache", "type": "cdn"},
            {"name": "Database", "type": "database"},
        ],
        [{"from": "Cache", "to": "Database"}],
    )


def test_first_proposal_refreshes_a_shared_match():
    gateway = Node("n1", Position(100, 100), NodeData("API Gateway", "network"))

    nodes, _ = merge_proposals(
        [
            {"name": "API Gateway", "type": "load balancer", "description": "Edge"},
            {"name": "API", "type": "service", "description": "Core"},
        ],
        [],
        [gateway],
        [],
    )

    assert len(nodes) == 1
    assert nodes[0].data == NodeData("API Gateway", "network", "Edge")


def test_ids_and_positions_survive_remerge():
    nodes, edges = merge_proposals(COMPONENTS, CONNECTIONS, [], [])
    # User dragged the database somewhere else
    nodes[1] = Node(nodes[1].id, Position(640, 480), nodes[1].data)

    refreshed = [
        {"name": "API Server", "type": "api-server", "description": "REST API"},
        {"name": "Database", "type": "database", "description": "Primary store"},
    ]
    nodes2, _ = merge_proposals(refreshed, [], nodes, edges)

    assert [n.id for n in nodes2] == [n.id for n in nodes]
    assert nodes2[1].position == Position(640, 480)
    assert nodes2[0].data.description == "REST API"
    assert nodes2[1].data.description == "Primary store"


def test_unresolvable_connection_is_dropped():
    nodes, edges = merge_proposals(COMPONENTS, CONNECTIONS, [], [])

    nodes2, edges2 = merge_proposals(
        [{"name": "Database", "type": "database"}],
        [{"from": "Cache", "to": "Database"}],
        nodes,
        edges,
    )

    assert len(nodes2) == len(nodes)
    assert len(edges2) == len(edges)


def test_connection_resolves_against_same_batch():
    nodes, edges = merge_proposals(
        [
            {"name": "Load Balancer", "type": "load-balancer"},
            {"name": "Web Server", "type": "web server"},
        ],
        [{"from": "load balancer", "to": "web"}],
        [],
        [],
    )
    assert len(edges) == 1
    assert edges[0].source == nodes[0].id
    assert edges[0].target == nodes[1].id


def test_new_nodes_use_ordinal_among_new_components():
    existing = Node("node-existing", Position(900, 900), NodeData("Database", "database"))
    nodes, _ = merge_proposals(
        [
            {"name": "Database", "type": "database"},
            {"name": "Cache", "type": "cache"},
            {"name": "CDN", "type": "cdn"},
        ],
        [],
        [existing],
        [],
    )

    assert nodes[0].id == "node-existing"
    assert nodes[0].position == Position(900, 900)
    # Cache and CDN are the 0th and 1st new components of the batch
    assert nodes[1].position == Position(100, 100)
    assert nodes[2].position == Position(300, 100)


def test_edges_deduplicated_by_endpoint_pair_not_id():
    nodes, _ = merge_proposals(COMPONENTS, [], [], [])
    prior_edge = Edge("edge-manual", nodes[0].id, nodes[1].id)

    _, edges = merge_proposals(COMPONENTS, CONNECTIONS * 2, nodes, [prior_edge])

    assert edges == [prior_edge]


def test_merge_never_removes_edges():
    nodes, edges = merge_proposals(COMPONENTS, CONNECTIONS, [], [])
    nodes2, edges2 = merge_proposals([{"name": "Queue", "type": "queue"}], [], nodes, edges)

    assert edges2 == edges
    assert len(nodes2) == 3


def test_connection_to_node_outside_batch_is_dropped():
    nodes, edges = merge_proposals(COMPONENTS, [], [], [])
    # Database is in the diagram but not in this batch
    nodes2, edges2 = merge_proposals(
        [{"name": "Cache", "type": "cache"}],
        [{"from": "Cache", "to": "Database"}],
        nodes,
        edges,
    )
    assert len(nodes2) == 3
    assert edges2 == []


def test_malformed_proposals_are_defaulted():
    nodes, edges = merge_proposals(
        [
            {"name": "Mystery Box"},
            {"type": "load-balancer"},
            {},
            "not a component",
            None,
        ],
        [{"from": "Mystery"}, {"to": "load"}, 7],
        [],
        [],
    )

    assert [n.label for n in nodes] == ["Mystery Box", "load-balancer", "Component"]
    assert [n.data.type for n in nodes] == ["server", "server", "server"]
    assert edges == []


def test_proposal_dataclasses_accepted():
    nodes, edges = merge_proposals(
        [ProposedComponent("Auth Service", "auth"), ProposedComponent("User DB", "database")],
        [ProposedConnection("auth", "user db", "reads users")],
        [],
        [],
    )
    assert nodes[0].data.type == "security"
    assert edges[0].label == "reads users"


def test_minted_ids_are_unique():
    frozen = IdFactory(clock=lambda: 1_700_000_000.0)
    components = [{"name": f"Service {i}", "type": "service"} for i in range(20)]
    nodes, _ = merge_proposals(components, [], [], [], id_factory=frozen)

    ids = [n.id for n in nodes]
    assert len(set(ids)) == 20
    assert all(i.startswith("node-1700000000000-") for i in ids)


def test_inputs_not_mutated():
    prior_nodes, prior_edges = merge_proposals(COMPONENTS, CONNECTIONS, [], [])
    snapshot_nodes = list(prior_nodes)
    snapshot_edges = list(prior_edges)

    merge_proposals([{"name": "Cache", "type": "cache"}], [{"from": "Cache", "to": "Cache"}], prior_nodes, prior_edges)

    assert prior_nodes == snapshot_nodes
    assert prior_edges == snapshot_edges


def test_ambiguous_reference_updates_first_matching_node():
    gateway = Node("n1", Position(100, 100), NodeData("API Gateway", "network"))
    payment = Node("n2", Position(300, 100), NodeData("Payment API", "payment"))

    nodes, _ = merge_proposals([{"name": "API", "type": "api"}], [], [gateway, payment], [])

    # The proposal "API" lands on the gateway; the gateway keeps its label
    assert len(nodes) == 2
    assert nodes[0].id == "n1"
    assert nodes[0].label == "API Gateway"
    assert nodes[0].data.type == "server"
    assert nodes[1] == payment


def test_exact_resolver_changes_ambiguous_outcome():
    gateway = Node("n1", Position(100, 100), NodeData("API Gateway", "network"))
    payment = Node("n2", Position(300, 100), NodeData("Payment API", "payment"))

    nodes, _ = merge_proposals(
        [{"name": "API", "type": "api"}],
        [],
        [gateway, payment],
        [],
        resolver=ExactResolver(),
    )

    assert len(nodes) == 3
    assert nodes[:2] == [gateway, payment]


def test_existing_color_and_icon_are_kept():
    styled = Node("n1", Position(0, 0), NodeData("Database", "database", color="#123456", icon="book"))
    nodes, _ = merge_proposals([{"name": "Database", "type": "database"}], [], [styled], [])
    assert nodes[0].data.color == "#123456"
    assert nodes[0].data.icon == "book"


def test_merge_into_diagram():
    diagram = merge_into_diagram(Diagram(), COMPONENTS, CONNECTIONS)
    assert len(diagram.nodes) == 2
    assert len(diagram.edges) == 1
    assert_no_dangling(diagram.nodes, diagram.edges)
