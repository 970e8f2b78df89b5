"""
Free-text fallback parser.

Extracts proposed components and connections from plain, newline-delimited
text with a handful of pattern rules. Best effort only: unusual phrasing is
missed or misparsed, and a line that matches nothing contributes nothing.
"""

import re
from typing import List, Optional, Tuple

from sysdesign.graph.normalize import normalize_type
from sysdesign.graph.types import ProposedComponent, ProposedConnection

# ============================================================
# PATTERNS
# ============================================================

CREATION_VERBS = ["create", "add", "include"]

RELATION_VERBS = [
    r"connects?\s+to",
    r"talks?\s+to",
    r"sends?\s+to",
    r"communicates?\s+with",
]

CREATION_PATTERN = re.compile(
    r"\b(?:" + "|".join(CREATION_VERBS) + r")\s+"
    r"(?:an?\s+|the\s+)?"
    r"(\w+(?:\s+\w+)*?)"                        # type phrase (lazy)
    r"(?:\s+(?:called|named)\s+(.+?))?"         # optional name
    r"(?:\s+that|\s+to|\s+for|$)",
    re.IGNORECASE,
)

RELATION_PATTERN = re.compile(
    r"(\w+(?:\s+\w+)*?)\s+"
    r"(?:" + "|".join(RELATION_VERBS) + r")\s+"
    r"(\w+(?:\s+\w+)*)",
    re.IGNORECASE,
)

DESCRIPTION_PATTERN = re.compile(
    r"\b(?:that|to|for)\s+(.+?)(?:\.|$)",
    re.IGNORECASE,
)

QUOTES = re.compile(r"['\"]")


# ============================================================
# LINE RULES
# ============================================================

def extract_description(line: str) -> Optional[str]:
    match = DESCRIPTION_PATTERN.search(line)
    if not match:
        return None
    return match.group(1).strip() or None


def parse_component(line: str) -> Optional[ProposedComponent]:
    match = CREATION_PATTERN.search(line)
    if not match:
        return None

    type_phrase = match.group(1).lower()
    name = QUOTES.sub("", match.group(2) or match.group(1)).strip()
    if not name:
        return None

    return ProposedComponent(
        name=name,
        type=normalize_type(type_phrase),
        description=extract_description(line),
    )


def parse_connection(line: str) -> Optional[ProposedConnection]:
    match = RELATION_PATTERN.search(line)
    if not match:
        return None

    return ProposedConnection(
        from_name=match.group(1).strip(),
        to_name=match.group(2).strip(),
    )


# ============================================================
# MAIN
# ============================================================

def parse_text(text: str) -> Tuple[List[ProposedComponent], List[ProposedConnection]]:
    """
    Run the creation and relation rules over every non-blank line.
    The two rules are independent: a line may yield a component,
    a connection, both, or neither. Never raises.
    """
    components: List[ProposedComponent] = []
    connections: List[ProposedConnection] = []

    if not isinstance(text, str):
        return components, connections

    for line in text.splitlines():
        if not line.strip():
            continue

        component = parse_component(line)
        if component:
            components.append(component)

        connection = parse_connection(line)
        if connection:
            connections.append(connection)

    return components, connections
