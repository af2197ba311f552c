"""
Graph builders module for estuarygraph.

This module translates already parsed map records into node store and
insertion calls. Parsing of map files belongs to the caller.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from ..classes.node import pymapnode
from ..classes.edge import pyedge
from ..classes.utils import calculate_distance
from .insertion import InsertMode, insert_edge

logger = logging.getLogger(__name__)


class GraphBuilders:
    """
    Bulk construction utilities for map graphs.

    Node and edge records come from an external loader. Edge records from
    untrusted sources should go through the strict policy; the chain and
    star helpers build fixtures whose invariants hold by construction.
    """

    def __init__(self, map_graph):
        """
        Initialize graph builders with reference to the map graph.

        Args:
            map_graph: The MapGraph instance to populate
        """
        self.map_graph = map_graph

    def load_nodes(self, records: Iterable[Any]) -> List[pymapnode]:
        """
        Create one node per record.

        Args:
            records: Mappings with 'habitat', 'x', 'y' keys, or (habitat, x, y) tuples

        Returns:
            List of created nodes in record order
        """
        aNode = []
        for record in records:
            if isinstance(record, Mapping):
                habitat, x, y = record['habitat'], record['x'], record['y']
            else:
                habitat, x, y = record
            aNode.append(self.map_graph.create_node(habitat, x, y))

        logger.info(f"Loaded {len(aNode)} nodes")
        return aNode

    def load_edges(self, records: Iterable[Sequence], mode: Optional[InsertMode] = None) -> int:
        """
        Insert one edge per record, looking nodes up by ID.

        Args:
            records: (source_id, target_id) or (source_id, target_id, length) tuples
            mode: Insertion policy; defaults to the graph's insert_mode

        Returns:
            int: Number of edges added

        Raises:
            KeyError: If a record references an unknown node ID
        """
        eMode = self.map_graph.insert_mode if mode is None else InsertMode(mode)
        nAccepted = 0
        nRejected = 0

        for record in records:
            if len(record) == 2:
                lSource, lTarget = record
                dLength = None
            else:
                lSource, lTarget, dLength = record

            pSource = self._lookup(lSource)
            pTarget = self._lookup(lTarget)
            if dLength is None:
                dLength = calculate_distance(pSource, pTarget)

            if insert_edge(pyedge(pSource, pTarget, dLength), eMode):
                nAccepted += 1
            else:
                nRejected += 1

        logger.info(f"Loaded {nAccepted} edges ({nRejected} rejected) with {eMode.value} insertion")
        return nAccepted

    def connect_chain(self, nodes: Sequence[pymapnode], length: Optional[float] = None) -> int:
        """
        Force-connect consecutive nodes: nodes[0] -> nodes[1] -> ... -> nodes[-1].

        Args:
            nodes: Stored nodes in chain order
            length: Length of every link; defaults to node distance

        Returns:
            int: Number of edges added
        """
        for pSource, pTarget in zip(nodes[:-1], nodes[1:]):
            self.map_graph.connect_nodes(pSource, pTarget,
                                         calculate_distance(pSource, pTarget) if length is None else length)
        return max(len(nodes) - 1, 0)

    def connect_star(self, center: pymapnode, leaves: Sequence[pymapnode],
                     length: Optional[float] = None) -> int:
        """
        Force-connect a center node to each leaf.

        Args:
            center: Stored hub node
            leaves: Stored leaf nodes
            length: Length of every spoke; defaults to node distance

        Returns:
            int: Number of edges added
        """
        for pLeaf in leaves:
            self.map_graph.connect_nodes(center, pLeaf,
                                         calculate_distance(center, pLeaf) if length is None else length)
        return len(leaves)

    def _lookup(self, node_id: int) -> pymapnode:
        pNode = self.map_graph.get_node_by_id(node_id)
        if pNode is None:
            raise KeyError(f"Unknown node ID {node_id}")
        return pNode
