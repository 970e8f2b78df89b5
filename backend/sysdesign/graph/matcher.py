"""
Entity matching: resolve a short textual reference ("database", "the API")
to a node of the current diagram.

The default strategy is case-insensitive substring containment with a
first-match tie-break: a node matches when its label contains the name.
List order decides between several matching nodes, so "API" resolves to
whichever of "API Gateway" / "Payment API" comes first.
"""

from abc import ABC, abstractmethod
from difflib import SequenceMatcher
from typing import Optional, Sequence

from sysdesign.graph.types import Node


def _clean(name) -> str:
    if not isinstance(name, str):
        return ""
    return name.strip().lower()


class NodeResolver(ABC):
    @abstractmethod
    def resolve(self, name: str, nodes: Sequence[Node]) -> Optional[Node]:
        """Return the node referenced by name, or None when not found."""
        pass


class SubstringResolver(NodeResolver):
    def resolve(self, name: str, nodes: Sequence[Node]) -> Optional[Node]:
        needle = _clean(name)
        # "" is a substring of every label
        if not needle:
            return None

        for node in nodes:
            if needle in node.label.lower():
                return node
        return None


class ExactResolver(NodeResolver):
    def resolve(self, name: str, nodes: Sequence[Node]) -> Optional[Node]:
        needle = _clean(name)
        if not needle:
            return None

        for node in nodes:
            if node.label.strip().lower() == needle:
                return node
        return None


class FuzzyResolver(NodeResolver):
    """Best edit-similarity label above cutoff; earlier node wins a tie."""

    def __init__(self, cutoff: float = 0.8):
        self.cutoff = cutoff

    def resolve(self, name: str, nodes: Sequence[Node]) -> Optional[Node]:
        needle = _clean(name)
        if not needle:
            return None

        best = None
        best_score = self.cutoff
        for node in nodes:
            score = SequenceMatcher(None, needle, node.label.lower()).ratio()
            if score > best_score or (best is None and score == best_score):
                best = node
                best_score = score
        return best


class ChainResolver(NodeResolver):
    """Try each resolver in priority order; the first hit wins."""

    def __init__(self, *resolvers: NodeResolver):
        self.resolvers = list(resolvers)

    def resolve(self, name: str, nodes: Sequence[Node]) -> Optional[Node]:
        for resolver in self.resolvers:
            node = resolver.resolve(name, nodes)
            if node is not None:
                return node
        return None


DEFAULT_RESOLVER = SubstringResolver()


def find_node(name: str, nodes: Sequence[Node]) -> Optional[Node]:
    return DEFAULT_RESOLVER.resolve(name, nodes)
