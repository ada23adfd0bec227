"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from slotgraph.networks import RouteMap, SocialNetwork, demo_route_map, demo_social_network
from slotgraph.store import VertexStore


@pytest.fixture
def store() -> VertexStore:
    """Return an empty five-slot vertex store."""
    return VertexStore(capacity=5)


@pytest.fixture
def route_map() -> RouteMap:
    """Return the demo route map: A(0) B(1) C(2) D(3) E(4)."""
    return demo_route_map()


@pytest.fixture
def network() -> SocialNetwork:
    """Return the demo network: Alice(0) Bob(1) Charlie(2) David(3) Eve(4) Frank(5)."""
    return demo_social_network()


@pytest.fixture
def empty_network() -> SocialNetwork:
    """Return an empty ten-user social network."""
    return SocialNetwork(capacity=10)
