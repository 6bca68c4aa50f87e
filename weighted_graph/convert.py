import networkx as nx

from .graph import Graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Copies a graph into a new networkx DiGraph.

    Every vertex becomes a node and every edge keeps its weight in the
    "weight" edge attribute.
    """
    digraph = nx.DiGraph()
    for label in graph.vertices():
        digraph.add_node(label)
        for target, weight in graph.targets(label).items():
            digraph.add_edge(label, target, weight=weight)
    return digraph
