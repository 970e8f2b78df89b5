from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sysdesign.errors import SnapshotError
from sysdesign.graph.types import Diagram

SNAPSHOT_VERSION = "1.0"


def export_json(diagram: Diagram, exported_at: Optional[datetime] = None) -> Dict[str, Any]:
    """{nodes, edges, metadata: {exportedAt, version}} snapshot of a diagram."""
    exported_at = exported_at or datetime.now(timezone.utc)

    return {
        **diagram.to_dict(),
        "metadata": {
            "exportedAt": exported_at.isoformat().replace("+00:00", "Z"),
            "version": SNAPSHOT_VERSION,
        },
    }


def import_json(snapshot: Any) -> Diagram:
    if not isinstance(snapshot, dict):
        raise SnapshotError("Snapshot must be a JSON object")

    nodes = snapshot.get("nodes")
    edges = snapshot.get("edges")
    if not isinstance(nodes, list) or not isinstance(edges, list):
        raise SnapshotError("Snapshot must contain 'nodes' and 'edges' lists")

    try:
        return Diagram.from_dict({"nodes": nodes, "edges": edges})
    except (KeyError, TypeError, AttributeError) as e:
        raise SnapshotError(f"Malformed node or edge in snapshot: {e}") from e
