from typing import Dict, List, Sequence

from sysdesign.graph.types import Node

EMPTY_SYSTEM_CONTEXT = "Starting with empty system"

SYSTEM_PROMPT = """
You are an expert system architect and designer. Your job is to help users create system architecture diagrams by describing the components and their relationships.

Current system context: {system_context}

Based on the user's request, generate a complete system architecture with:
1. All necessary components with clear names and types
2. All connections between components
3. Use specific technical terms for component types (e.g., "load-balancer", "database", "api-server", "cache", "cdn", "message-broker", "web-client", "mobile-client")

Make sure to include all components mentioned in the user's description and their interconnections.
Keep the names of components that already exist in the current system.

Rules:
- Output ONLY valid JSON
- No markdown, no explanations

JSON schema:
{{
  "components": [
    {{ "name": "string", "type": "string", "description": "string" }}
  ],
  "connections": [
    {{ "from": "component name", "to": "component name", "description": "string (optional)" }}
  ],
  "description": "one sentence summary of the design (optional)"
}}
"""


def build_system_context(nodes: Sequence[Node]) -> str:
    """Human-readable summary of the diagram sent along with each request."""
    if not nodes:
        return EMPTY_SYSTEM_CONTEXT

    labels = ", ".join(node.label for node in nodes)
    return f"Current system has {len(nodes)} components: {labels}"


def build_messages(user_prompt: str, system_context: str) -> List[Dict]:
    return [
        {
            "role": "system",
            "content": SYSTEM_PROMPT.format(system_context=system_context),
        },
        {"role": "user", "content": f"User request: {user_prompt}"},
    ]
