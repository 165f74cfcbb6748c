import pytest

from metro.adapters.graph import DijkstraShortestPathSolver
from metro.adapters.index import BinarySearchTreeIndex
from metro.config import reset_config
from metro.container import reset_container
from metro.services import MetroNetworkService
from metro.shell import seed_demo_network


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from an unconfigured, unwired application."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def network():
    """An empty network with the default index and solver."""
    return MetroNetworkService(
        index=BinarySearchTreeIndex(),
        route_solver=DijkstraShortestPathSolver(),
    )


@pytest.fixture
def demo_network(network):
    """A-B(5), B-C(3), C-D(4), D-A(7)."""
    seed_demo_network(network)
    return network
