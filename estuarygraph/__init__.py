"""
estuarygraph - Estuary Map Graph Library

A Python library for building directed graphs of estuary habitat maps.
Nodes carry a habitat classification and a position; directed edges carry
a traversal length. Edge insertion keeps the incoming and outgoing
adjacency lists of every node consistent.

Main Classes:
    MapGraph: Node store and construction API
    pymapnode: Node representation
    pyedge: Directed edge between nodes
    HabitatType: Habitat classification

Example:
    >>> from estuarygraph import MapGraph, HabitatType
    >>> graph = MapGraph()
    >>> a = graph.create_node(HabitatType.DISTRIBUTARY, 0.0, 0.0)
    >>> b = graph.create_node(HabitatType.BLIND_CHANNEL, 1.0, 0.0)
    >>> graph.add_edge(a, b)
    True
    >>> graph.validate_edge_consistency().passed
    True
"""

__version__ = "0.1.0"

from estuarygraph.classes.habitat import HabitatType
from estuarygraph.classes.node import pymapnode
from estuarygraph.classes.edge import pyedge
from estuarygraph.operations.insertion import InsertMode, insert_edge, check_and_add_edge, connect_nodes
from estuarygraph.analysis.validation import (
    EdgeConsistencyError,
    EdgeValidationResult,
    validate_edge_consistency,
)
from estuarygraph.core.graph import MapGraph

__all__ = [
    'MapGraph',
    'pymapnode',
    'pyedge',
    'HabitatType',
    'InsertMode',
    'insert_edge',
    'check_and_add_edge',
    'connect_nodes',
    'EdgeConsistencyError',
    'EdgeValidationResult',
    'validate_edge_consistency',
]
