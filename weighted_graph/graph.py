from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Hashable, Set, Type, TypeVar

L = TypeVar("L", bound=Hashable)


class InvalidArgumentError(ValueError):
    """Raised when a vertex label is None or an edge weight is not a non-negative int."""


def is_hashable(label: Any) -> bool:
    try:
        hash(label)
    except TypeError:
        return False
    return True


def check_label(label: Any, role: str = "Vertex") -> None:
    if label is None:
        raise InvalidArgumentError(f"{role} label cannot be None.")
    if not is_hashable(label):
        raise InvalidArgumentError(f"{role} label {label!r} is not hashable.")


def check_weight(weight: Any) -> None:
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidArgumentError(f"Weight {weight!r} is not an integer.")
    if weight < 0:
        raise InvalidArgumentError(f"Weight {weight} is negative.")


class Graph(ABC, Generic[L]):
    """
    A mutable, directed, weighted graph with uniquely labeled vertices.

    At most one edge exists from a source to a target, and its weight is a
    positive integer. Setting a weight of zero removes the edge. Every
    representation answers queries with fresh copies so that callers can
    never mutate the graph through a returned collection.
    """

    @abstractmethod
    def add(self, label: L) -> bool:
        """
        Adds a vertex to the graph.

        Args:
            label: The label of the new vertex.

        Returns:
            True if the vertex was added, False if it was already present.

        Raises:
            InvalidArgumentError: If label is None or not hashable.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """
        Adds, changes or removes the edge from source to target.

        Vertices that are not yet in the graph are added. A positive weight
        creates the edge or overwrites its weight; a weight of zero removes
        the edge if it exists.

        Args:
            source: The label of the source vertex.
            target: The label of the target vertex.
            weight: The new, non-negative weight of the edge.

        Returns:
            The previous weight of the edge, or 0 if there was no edge.

        Raises:
            InvalidArgumentError: If a label is None or not hashable, or the
                weight is not a non-negative integer.
                The graph is left unchanged.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, label: L) -> bool:
        """
        Removes a vertex together with every edge into or out of it.

        Returns:
            True if the vertex was removed, False if it was not in the graph.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[L]:
        """Returns a new set holding the labels of all vertices."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """
        Returns every vertex with an edge into target, mapped to the edge weight.

        The result is empty if target has no incoming edges or is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """
        Returns every vertex source has an edge to, mapped to the edge weight.

        The result is empty if source has no outgoing edges or is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def format(self) -> str:
        """Returns a human-readable listing of the vertices and edges."""
        raise NotImplementedError

    @abstractmethod
    def edge_count(self) -> int:
        """Returns the number of edges in the graph."""
        raise NotImplementedError

    def __contains__(self, label: object) -> bool:
        """Checks if a vertex exists in the graph."""
        return is_hashable(label) and label in self.vertices()

    def __len__(self) -> int:
        """Returns the number of vertices in the graph."""
        return len(self.vertices())

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} vertices={len(self)} edges={self.edge_count()}>"


def _representations() -> Dict[str, Type[Graph]]:
    from .edges_graph import EdgesGraph
    from .vertices_graph import VerticesGraph

    return {"edges": EdgesGraph, "vertices": VerticesGraph}


def empty(representation: str = "edges") -> Graph:
    """
    Creates an empty graph.

    Args:
        representation: "edges" for a flat edge list, "vertices" for
            per-vertex adjacency maps.

    Raises:
        ValueError: If the representation is unknown.
    """
    representations = _representations()
    if representation not in representations:
        raise ValueError(f"Unknown graph representation {representation!r}.")
    return representations[representation]()
