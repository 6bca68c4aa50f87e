import pytest
from weighted_graph.edges_graph import EdgesGraph
from weighted_graph.vertices_graph import VerticesGraph

REPRESENTATIONS = [EdgesGraph, VerticesGraph]


# Tests taking ``g`` run once per representation.
@pytest.fixture(params=REPRESENTATIONS, ids=lambda cls: cls.__name__)
def g(request):
    return request.param()
