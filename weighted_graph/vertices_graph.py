import logging
from types import MappingProxyType
from typing import Dict, Generic, List, Mapping, Optional, Set

from .graph import Graph, L, check_label, check_weight, is_hashable

logger = logging.getLogger(__name__)


class Vertex(Generic[L]):
    """A labeled vertex owning its outgoing edges as a target -> weight map."""

    def __init__(self, name: L) -> None:
        check_label(name)
        self.name = name
        self._edges: Dict[L, int] = {}

    def edges(self) -> Mapping[L, int]:
        """Returns a read-only view of the outgoing edges."""
        return MappingProxyType(self._edges)

    def set_edge(self, target: L, weight: int) -> int:
        """
        Sets the weight of the edge to target, removing it when weight is zero.

        Returns:
            The previous weight of the edge, or 0 if there was no edge.
        """
        check_label(target, "Target")
        check_weight(weight)
        previous_weight = self._edges.get(target, 0)
        if weight > 0:
            self._edges[target] = weight
        else:
            self._edges.pop(target, None)
        return previous_weight

    def remove_edge(self, target: L) -> None:
        self._edges.pop(target, None)

    def __str__(self) -> str:
        return f"{self.name} -> {self._edges}"


class VerticesGraph(Graph[L]):
    """
    Graph stored as a list of vertices, each holding its own outgoing edges.
    """

    def __init__(self) -> None:
        self._vertices: List[Vertex[L]] = []
        self._check_rep()

    def _check_rep(self) -> None:
        names = [vertex.name for vertex in self._vertices]
        assert len(set(names)) == len(names)
        for vertex in self._vertices:
            for target, weight in vertex.edges().items():
                assert target in names
                assert weight > 0

    def _find_vertex(self, name: L) -> Optional[Vertex[L]]:
        for vertex in self._vertices:
            if vertex.name == name:
                return vertex
        return None

    def add(self, label: L) -> bool:
        check_label(label)
        if self._find_vertex(label) is not None:
            return False
        self._vertices.append(Vertex(label))
        logger.debug("Added vertex %r", label)
        self._check_rep()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        check_label(source, "Source")
        check_label(target, "Target")
        check_weight(weight)

        self.add(source)
        self.add(target)

        source_vertex = self._find_vertex(source)
        previous_weight = source_vertex.set_edge(target, weight)

        logger.debug("Set edge %r -> %r from %d to %d", source, target, previous_weight, weight)
        self._check_rep()
        return previous_weight

    def remove(self, label: L) -> bool:
        vertex = self._find_vertex(label)
        if vertex is None:
            return False
        self._vertices.remove(vertex)
        for other in self._vertices:
            other.remove_edge(label)
        logger.debug("Removed vertex %r", label)
        self._check_rep()
        return True

    def vertices(self) -> Set[L]:
        return {vertex.name for vertex in self._vertices}

    def sources(self, target: L) -> Dict[L, int]:
        result: Dict[L, int] = {}
        if not is_hashable(target):
            return result
        for vertex in self._vertices:
            weight = vertex.edges().get(target)
            if weight is not None:
                result[vertex.name] = weight
        return result

    def targets(self, source: L) -> Dict[L, int]:
        vertex = self._find_vertex(source)
        if vertex is None:
            return {}
        return dict(vertex.edges())

    def edge_count(self) -> int:
        return sum(len(vertex.edges()) for vertex in self._vertices)

    def format(self) -> str:
        lines = ["Graph:"]
        lines.extend(str(vertex) for vertex in self._vertices)
        return "\n".join(lines) + "\n"
