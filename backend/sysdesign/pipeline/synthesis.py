from dataclasses import dataclass
from typing import Any, Optional

from sysdesign.errors import PayloadError, ServiceCallError
from sysdesign.graph.matcher import NodeResolver
from sysdesign.graph.merge import IdFactory, merge_into_diagram
from sysdesign.graph.types import Diagram
from sysdesign.llm.client import LLMClient, get_llm_client
from sysdesign.llm.parser import parse_design_payload, to_proposals
from sysdesign.llm.prompt import build_messages, build_system_context
from sysdesign.nlp.text_parser import parse_text

DEFAULT_SUCCESS_MESSAGE = "Design generated successfully!"
SERVICE_ERROR_MESSAGE = "An error occurred while generating the design."
EMPTY_PROMPT_MESSAGE = "Describe the system you want to build."


@dataclass
class SynthesisResult:
    status: str                 # success | error
    diagram: Diagram
    message: str
    system_context: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "message": self.message,
            "system_context": self.system_context,
            **self.diagram.to_dict(),
        }


class SynthesisService:
    """
    One user submission, end to end:
    context → generative service → payload validation → merge.

    Errors never leave this class as exceptions. A failed call or an
    invalid payload yields status "error" and the diagram it was given,
    so nothing is partially merged.
    """

    def __init__(
        self,
        client: Optional[LLMClient] = None,
        resolver: Optional[NodeResolver] = None,
        id_factory: Optional[IdFactory] = None,
    ):
        self._client = client
        self.resolver = resolver
        self.id_factory = id_factory

    @property
    def client(self) -> LLMClient:
        if self._client is None:
            self._client = get_llm_client()
        return self._client

    # -------------------------
    # Structured path
    # -------------------------

    def synthesize(self, prompt: str, diagram: Diagram) -> SynthesisResult:
        system_context = build_system_context(diagram.nodes)

        if not prompt or not prompt.strip():
            return SynthesisResult("success", diagram, EMPTY_PROMPT_MESSAGE, system_context)

        print(f"[Synthesis] {system_context}")

        try:
            raw = self.client.generate(build_messages(prompt.strip(), system_context))
        except ServiceCallError as e:
            print(f"[Synthesis] Service call failed: {e}")
            return SynthesisResult("error", diagram, SERVICE_ERROR_MESSAGE, system_context)

        return self.apply_payload(raw, diagram, system_context=system_context)

    def apply_payload(
        self,
        raw: Any,
        diagram: Diagram,
        system_context: Optional[str] = None,
    ) -> SynthesisResult:
        if system_context is None:
            system_context = build_system_context(diagram.nodes)

        try:
            payload = parse_design_payload(raw)
        except PayloadError as e:
            print(f"[Synthesis] Rejected payload: {e}")
            return SynthesisResult(
                "error",
                diagram,
                f"Error generating design: {e}",
                system_context,
            )

        components, connections = to_proposals(payload)
        merged = merge_into_diagram(
            diagram,
            components,
            connections,
            resolver=self.resolver,
            id_factory=self.id_factory,
        )

        return SynthesisResult(
            "success",
            merged,
            payload.description or DEFAULT_SUCCESS_MESSAGE,
            system_context,
        )

    # -------------------------
    # Free-text fallback path
    # -------------------------

    def apply_text(self, text: str, diagram: Diagram) -> SynthesisResult:
        components, connections = parse_text(text)
        print(
            f"[Synthesis] Fallback parser found {len(components)} components, "
            f"{len(connections)} connections"
        )

        merged = merge_into_diagram(
            diagram,
            components,
            connections,
            resolver=self.resolver,
            id_factory=self.id_factory,
        )

        return SynthesisResult(
            "success",
            merged,
            f"Parsed {len(components)} components and {len(connections)} connections",
            build_system_context(diagram.nodes),
        )


def apply_text(text: str, diagram: Optional[Diagram] = None) -> Diagram:
    return SynthesisService().apply_text(text, diagram or Diagram()).diagram
