import logging
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Set

from .graph import Graph, L, check_label, check_weight, is_hashable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """An immutable directed edge from source to target."""
    source: Hashable
    target: Hashable
    weight: int

    def __post_init__(self) -> None:
        check_label(self.source, "Source")
        check_label(self.target, "Target")
        check_weight(self.weight)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class EdgesGraph(Graph[L]):
    """
    Graph stored as a set of vertex labels and a flat list of edges.
    """

    def __init__(self) -> None:
        self._vertices: Set[L] = set()
        self._edges: List[Edge] = []
        self._check_rep()

    def _check_rep(self) -> None:
        for edge in self._edges:
            assert edge.source in self._vertices
            assert edge.target in self._vertices
            assert edge.weight > 0
        pairs = {(edge.source, edge.target) for edge in self._edges}
        assert len(pairs) == len(self._edges)

    def _find_edge(self, source: L, target: L) -> Optional[Edge]:
        for edge in self._edges:
            if edge.source == source and edge.target == target:
                return edge
        return None

    def add(self, label: L) -> bool:
        check_label(label)
        if label in self._vertices:
            return False
        self._vertices.add(label)
        logger.debug("Added vertex %r", label)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_label(source, "Source")
        check_label(target, "Target")
        check_weight(weight)

        self.add(source)
        self.add(target)

        previous_weight = 0
        existing = self._find_edge(source, target)
        if existing is not None:
            previous_weight = existing.weight
            self._edges.remove(existing)
        if weight > 0:
            self._edges.append(Edge(source, target, weight))

        logger.debug("Set edge %r -> %r from %d to %d", source, target, previous_weight, weight)
        self._check_rep()
        return previous_weight

    def remove(self, label: L) -> bool:
        if not is_hashable(label) or label not in self._vertices:
            return False
        self._vertices.remove(label)
        self._edges = [
            edge for edge in self._edges
            if edge.source != label and edge.target != label
        ]
        logger.debug("Removed vertex %r", label)
        self._check_rep()
        return True

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def edge_count(self) -> int:
        return len(self._edges)

    def format(self) -> str:
        vertices = ", ".join(str(label) for label in self._vertices)
        lines = ["Graph:", f"Vertices: [{vertices}]", "Edges:"]
        lines.extend(str(edge) for edge in self._edges)
        return "\n".join(lines) + "\n"
