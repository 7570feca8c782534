import pytest

from labgraph.config import reset_config
from labgraph.domain.models import GraphBacking
from labgraph.graph.factory import create_graph


@pytest.fixture(autouse=True)
def fresh_config():
    """Each test sees configuration built from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(params=list(GraphBacking), ids=lambda backing: backing.value)
def backing(request):
    return request.param


@pytest.fixture
def make_graph(backing):
    """Factory producing empty graphs of the parametrized backing."""

    def _make(name: str = "a graph"):
        return create_graph(name=name, backing=backing)

    return _make


@pytest.fixture
def graph(make_graph):
    return make_graph()
