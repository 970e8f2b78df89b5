from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sysdesign.errors import PayloadError
from sysdesign.graph.types import ProposedComponent, ProposedConnection
from sysdesign.utils.json_extract import extract_json


# ============================================================
# PAYLOAD SCHEMA (LLM TRUST BOUNDARY)
# ============================================================

class ComponentPayload(BaseModel):
    # name/type may be missing; the merge engine defaults them
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None


class ConnectionPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    description: Optional[str] = None


class SystemDesignPayload(BaseModel):
    components: List[ComponentPayload]
    connections: List[ConnectionPayload] = Field(default_factory=list)
    description: Optional[str] = None


# ============================================================
# PARSER
# ============================================================

def parse_design_payload(raw: Union[str, Dict[str, Any]]) -> SystemDesignPayload:
    """
    Validate a structured component/connection payload.

    Accepts the raw service text (code fences and surrounding prose are
    tolerated) or an already decoded dict. Raises PayloadError when no JSON
    object can be found or the object does not fit the schema.
    """
    data = extract_json(raw) if isinstance(raw, str) else raw

    if not isinstance(data, dict):
        raise PayloadError("Response did not contain a JSON object")

    try:
        return SystemDesignPayload.model_validate(data)
    except ValidationError as e:
        raise PayloadError(f"Invalid system design payload: {e}") from e


def to_proposals(
    payload: SystemDesignPayload,
) -> Tuple[List[ProposedComponent], List[ProposedConnection]]:
    components = [
        ProposedComponent(
            name=c.name,
            type=c.type,
            description=c.description,
        )
        for c in payload.components
    ]

    connections = [
        ProposedConnection(
            from_name=c.from_,
            to_name=c.to,
            description=c.description,
        )
        for c in payload.connections
    ]

    return components, connections
