"""Tests for the MapGraph node store and graph-level insertion."""

import pytest

from estuarygraph import HabitatType, InsertMode, MapGraph, pyedge, pymapnode

from conftest import require_valid


def test_create_node_assigns_fresh_ids(graph):
    a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    b = graph.create_node("BlindChannel", 3.0, 4.0)

    assert (a.lNodeID, b.lNodeID) == (0, 1)
    assert b.eHabitat is HabitatType.BLIND_CHANNEL
    assert b.position == (3.0, 4.0)
    assert a.aEdge_in == [] and a.aEdge_out == []
    assert graph.get_node_count() == 2
    assert graph.get_node_by_id(1) is b
    assert graph.get_node_by_id(7) is None


def test_first_id_option():
    graph = MapGraph(first_id=10)

    assert graph.create_node(HabitatType.HARBOR, 0.0, 0.0).lNodeID == 10
    with pytest.raises(ValueError):
        MapGraph(first_id=-1)


def test_unknown_habitat_raises(graph):
    with pytest.raises(ValueError):
        graph.create_node("Desert", 0.0, 0.0)
    assert graph.get_node_count() == 0


def test_has_node_is_identity_based(graph):
    a = graph.create_node(HabitatType.NEARSHORE, 1.0, 1.0)
    twin = pymapnode(HabitatType.NEARSHORE, 1.0, 1.0, lNodeID=a.lNodeID)

    assert graph.has_node(a)
    assert not graph.has_node(twin)


def test_add_node_keeps_or_assigns_ids(graph):
    external = pymapnode(HabitatType.IMPOUNDMENT, 0.0, 0.0, lNodeID=5)
    fresh = pymapnode(HabitatType.IMPOUNDMENT, 1.0, 0.0)

    assert graph.add_node(external) == 5
    assert graph.add_node(external) == 5
    assert graph.add_node(fresh) == 6
    assert graph.get_node_count() == 2

    clash = pymapnode(HabitatType.IMPOUNDMENT, 2.0, 0.0, lNodeID=5)
    with pytest.raises(ValueError):
        graph.add_node(clash)


def test_get_nodes_returns_copy(graph):
    graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)

    graph.get_nodes().clear()

    assert graph.get_node_count() == 1


def test_add_edge_defaults_length_to_distance(graph):
    a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    b = graph.create_node(HabitatType.DISTRIBUTARY, 3.0, 4.0)

    assert graph.add_edge(a, b) is True
    assert a.aEdge_out[0].dLength == pytest.approx(5.0)


def test_add_edge_uses_configured_mode():
    graph = MapGraph(insert_mode=InsertMode.UNCHECKED)
    a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    b = graph.create_node(HabitatType.DISTRIBUTARY, 1.0, 0.0)

    assert graph.add_edge(a, b, 1.0) is True
    assert graph.add_edge(b, a, 1.0) is True
    assert graph.add_edge(b, a, 1.0, mode=InsertMode.STRICT) is False
    assert graph.get_edge_count() == 2


def test_coincident_nodes_are_distinct(graph):
    a = graph.create_node(HabitatType.DISTRIBUTARY, 2.0, 2.0)
    b = graph.create_node(HabitatType.DISTRIBUTARY, 2.0, 2.0)

    # zero distance is not a valid length
    assert graph.add_edge(a, b) is False
    assert graph.add_edge(a, b, 0.5) is True


def test_graph_level_insertion_rejects_foreign_nodes(graph):
    a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    foreign = pymapnode(HabitatType.DISTRIBUTARY, 1.0, 0.0, lNodeID=1)

    with pytest.raises(ValueError):
        graph.check_and_add_edge(pyedge(a, foreign, 1.0))
    with pytest.raises(ValueError):
        graph.connect_nodes(foreign, a, 1.0)
    with pytest.raises(ValueError):
        graph.add_edge(a, foreign, 1.0)

    assert a.aEdge_out == [] and a.aEdge_in == []


def test_check_and_add_edge_and_connect_nodes_on_graph(graph):
    a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    b = graph.create_node(HabitatType.BLIND_CHANNEL, 1.0, 0.0)

    assert graph.check_and_add_edge(pyedge(a, b, 5.0)) is True
    assert graph.check_and_add_edge(pyedge(b, a, 5.0)) is False
    graph.connect_nodes(b, a, 5.0)

    result = graph.validate_edge_consistency()
    require_valid(result)
    assert result.total_unique_edges == graph.get_edge_count() == 2
    assert list(graph.iter_edges()) == [pyedge(a, b, 5.0), pyedge(b, a, 5.0)]


def test_sources_and_sinks(graph):
    a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    b = graph.create_node(HabitatType.DISTRIBUTARY, 1.0, 0.0)
    c = graph.create_node(HabitatType.BLIND_CHANNEL, 2.0, 0.0)
    graph.add_edge(a, b)
    graph.add_edge(b, c)

    assert graph.get_sources() == [a]
    assert graph.get_sinks() == [c]


def test_node_edge_queries(graph):
    a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    b = graph.create_node(HabitatType.DISTRIBUTARY, 1.0, 0.0)
    c = graph.create_node(HabitatType.DISTRIBUTARY, 2.0, 0.0)
    graph.add_edge(a, b, 2.0)

    assert a.get_edge_to(b) == pyedge(a, b, 2.0)
    assert b.get_edge_from(a) == pyedge(a, b, 2.0)
    assert a.get_edge_from(b) is None
    assert a.is_connected_to(b) and b.is_connected_to(a)
    assert not a.is_connected_to(c)
    assert (a.out_degree, a.in_degree, b.in_degree) == (1, 0, 1)
