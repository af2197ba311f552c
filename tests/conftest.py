"""Shared fixtures for estuarygraph tests."""

import pytest

from estuarygraph import HabitatType, MapGraph, pymapnode


def create_map_node(x: float, y: float, node_id: int) -> pymapnode:
    node = pymapnode(HabitatType.DISTRIBUTARY, x, y)
    node.lNodeID = node_id
    return node


def require_valid(result):
    assert result.passed, "\n".join(result.errors)


@pytest.fixture
def graph():
    return MapGraph()


@pytest.fixture
def two_nodes():
    return create_map_node(0.0, 0.0, 0), create_map_node(1.0, 0.0, 1)
