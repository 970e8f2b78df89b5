import json

from fastapi import APIRouter, Depends, HTTPException, Response

from sysdesign.config import APP_VERSION
from sysdesign.db.session import log_generation
from sysdesign.errors import SnapshotError
from sysdesign.export import export_json, import_json, render_svg
from sysdesign.graph import editing
from sysdesign.graph.normalize import NODE_TYPES
from sysdesign.graph.style import node_color, node_icon
from sysdesign.graph.types import Diagram, Position
from sysdesign.llm.prompt import build_system_context
from sysdesign.pipeline.synthesis import SynthesisService
from sysdesign.schemas import (
    AddNodeRequest,
    DeleteEdgeRequest,
    DeleteNodeRequest,
    DiagramRequest,
    GenerateRequest,
    ImportRequest,
    MergeRequest,
    MoveNodeRequest,
    ParseRequest,
    UpdateNodeRequest,
)

router = APIRouter()


def get_synthesis_service() -> SynthesisService:
    return SynthesisService()


def diagram_response(diagram: Diagram) -> dict:
    return {"status": "success", **diagram.to_dict()}


# ============================
# SYNTHESIS
# ============================

@router.post("/generate")
def generate_design(
    request: GenerateRequest,
    service: SynthesisService = Depends(get_synthesis_service),
):
    result = service.synthesize(request.prompt, request.to_diagram())
    log_generation("generate", request.prompt, result)
    return result.to_dict()


@router.post("/parse")
def parse_design_text(
    request: ParseRequest,
    service: SynthesisService = Depends(get_synthesis_service),
):
    result = service.apply_text(request.text, request.to_diagram())
    log_generation("parse", request.text, result)
    return result.to_dict()


@router.post("/merge")
def merge_design_payload(
    request: MergeRequest,
    service: SynthesisService = Depends(get_synthesis_service),
):
    result = service.apply_payload(request.payload, request.to_diagram())
    log_generation("merge", json.dumps(request.payload), result)
    return result.to_dict()


@router.post("/context")
def system_context(request: DiagramRequest):
    return {"system_context": build_system_context(request.to_diagram().nodes)}


@router.get("/types")
def node_types():
    return {
        "types": [
            {"type": t, "color": node_color(t), "icon": node_icon(t)}
            for t in NODE_TYPES
        ]
    }


# ============================
# MANUAL EDITS
# ============================

@router.post("/diagram/nodes")
def add_node(request: AddNodeRequest):
    diagram = editing.add_node(
        request.to_diagram(),
        label=request.label,
        node_type=request.type,
        description=request.description,
        color=request.color,
        icon=request.icon,
    )
    return diagram_response(diagram)


@router.post("/diagram/nodes/update")
def update_node(request: UpdateNodeRequest):
    changes = {
        key: value
        for key, value in {
            "label": request.label,
            "type": request.type,
            "description": request.description,
            "color": request.color,
            "icon": request.icon,
        }.items()
        if value is not None
    }
    diagram = editing.update_node(request.to_diagram(), request.node_id, **changes)
    return diagram_response(diagram)


@router.post("/diagram/nodes/position")
def move_node(request: MoveNodeRequest):
    position = Position(request.position.x, request.position.y)
    diagram = editing.move_node(request.to_diagram(), request.node_id, position)
    return diagram_response(diagram)


@router.post("/diagram/nodes/delete")
def delete_node(request: DeleteNodeRequest):
    diagram = editing.delete_node(request.to_diagram(), request.node_id)
    return diagram_response(diagram)


@router.post("/diagram/edges/delete")
def delete_edge(request: DeleteEdgeRequest):
    diagram = editing.delete_edge(request.to_diagram(), request.edge_id)
    return diagram_response(diagram)


@router.post("/diagram/clear")
def clear_diagram():
    return diagram_response(editing.clear_diagram())


# ============================
# EXPORT / IMPORT
# ============================

@router.post("/export/json")
def export_diagram_json(request: DiagramRequest):
    return export_json(request.to_diagram())


@router.post("/export/svg")
def export_diagram_svg(request: DiagramRequest):
    return Response(
        content=render_svg(request.to_diagram()),
        media_type="image/svg+xml",
    )


@router.post("/import/json")
def import_diagram_json(request: ImportRequest):
    try:
        diagram = import_json(request.snapshot)
    except SnapshotError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return diagram_response(diagram)


@router.get("/health")
def health():
    return {"status": "ok", "version": APP_VERSION}
