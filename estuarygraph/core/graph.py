"""
Core graph data structure for estuary map representation.

This module provides the node store and the construction API. Edge
invariants are enforced by the insertion policies, not by the store.
"""

import logging
from typing import Dict, Iterator, List, Optional, Union

from ..classes.edge import pyedge
from ..classes.habitat import HabitatType
from ..classes.node import pymapnode
from ..classes.utils import calculate_distance
from ..operations.insertion import InsertMode, insert_edge
from ..operations.builders import GraphBuilders
from ..analysis.validation import EdgeValidationResult, validate_edge_consistency
from ..analysis.statistics import get_graph_statistics

logger = logging.getLogger(__name__)


class MapGraph:
    """
    Node store for an estuary map.

    This class owns the nodes of the map and provides:
    - Node creation and ID management
    - Existence checks and node lookup
    - Edge insertion through the strict or unchecked policy
    - Edge counting over the canonical outgoing lists
    """

    def __init__(self, insert_mode: InsertMode = InsertMode.STRICT, first_id: int = 0):
        """
        Initialize an empty map graph.

        Args:
            insert_mode: Policy used by add_edge when no mode is given
            first_id: ID assigned to the first created node
        """
        if first_id < 0:
            raise ValueError(f"first_id must be non-negative, got {first_id}")

        self.insert_mode = InsertMode(insert_mode)
        self.aNode: List[pymapnode] = []
        self.id_to_node: Dict[int, pymapnode] = {}
        self._next_id = first_id

        self.builders = GraphBuilders(self)

        logger.debug(f"Initialized MapGraph with {self.insert_mode.value} insertion")

    # ========================================================================
    # NODE STORE
    # ========================================================================

    def create_node(self, habitat: Union[HabitatType, str], x: float, y: float) -> pymapnode:
        """
        Allocate a node with a fresh ID and empty adjacency lists.

        Args:
            habitat: Habitat type, or its name
            x: X coordinate
            y: Y coordinate

        Returns:
            pymapnode: The new node, already registered in the store
        """
        pNode = pymapnode(HabitatType.from_name(habitat), x, y)
        self.add_node(pNode)
        return pNode

    def add_node(self, pNode: pymapnode) -> int:
        """
        Register an externally created node.

        Args:
            pNode: Node to register. A node with lNodeID < 0 gets a fresh ID.

        Returns:
            int: The node ID

        Raises:
            ValueError: If another stored node already uses the node's ID
        """
        if not isinstance(pNode, pymapnode):
            raise TypeError(f"Expected pymapnode, got {type(pNode).__name__}")

        if pNode.lNodeID >= 0:
            pExisting = self.id_to_node.get(pNode.lNodeID)
            if pExisting is pNode:
                return pNode.lNodeID
            if pExisting is not None:
                raise ValueError(f"Node ID {pNode.lNodeID} is already used by another node")
        else:
            while self._next_id in self.id_to_node:
                self._next_id += 1
            pNode.lNodeID = self._next_id

        self.id_to_node[pNode.lNodeID] = pNode
        self.aNode.append(pNode)
        self._next_id = max(self._next_id, pNode.lNodeID + 1)
        return pNode.lNodeID

    def has_node(self, pNode: pymapnode) -> bool:
        """True if this exact node is part of the graph."""
        return self.id_to_node.get(getattr(pNode, 'lNodeID', None)) is pNode

    def get_node_by_id(self, node_id: int) -> Optional[pymapnode]:
        """
        Get a node by its ID.

        Args:
            node_id: Node ID

        Returns:
            The node object, or None if not found
        """
        return self.id_to_node.get(node_id)

    def get_nodes(self) -> List[pymapnode]:
        """Nodes in creation order. The list is a copy."""
        return self.aNode.copy()

    def get_node_count(self) -> int:
        return len(self.aNode)

    def get_sources(self) -> List[pymapnode]:
        """Get nodes with no incoming edges."""
        return [pNode for pNode in self.aNode if not pNode.aEdge_in]

    def get_sinks(self) -> List[pymapnode]:
        """Get nodes with no outgoing edges."""
        return [pNode for pNode in self.aNode if not pNode.aEdge_out]

    # ========================================================================
    # EDGES
    # ========================================================================

    def iter_edges(self) -> Iterator[pyedge]:
        """Iterate over every directed edge once, from the outgoing lists."""
        for pNode in self.aNode:
            yield from pNode.aEdge_out

    def get_edge_count(self) -> int:
        """Total unique directed edges."""
        return sum(len(pNode.aEdge_out) for pNode in self.aNode)

    def _require_members(self, pNode_source: pymapnode, pNode_target: pymapnode):
        for pNode in (pNode_source, pNode_target):
            if not self.has_node(pNode):
                raise ValueError(f"Node {getattr(pNode, 'lNodeID', pNode)} is not part of this graph")

    def add_edge(self, pNode_source: pymapnode, pNode_target: pymapnode,
                 dLength: Optional[float] = None, mode: Optional[InsertMode] = None) -> bool:
        """
        Insert an edge between two stored nodes.

        Args:
            pNode_source: Node the edge leaves
            pNode_target: Node the edge enters
            dLength: Traversal length; defaults to the distance between the nodes
            mode: Insertion policy; defaults to the graph's insert_mode

        Returns:
            bool: True if the edge was added

        Raises:
            ValueError: If either endpoint is not part of this graph
        """
        self._require_members(pNode_source, pNode_target)
        if dLength is None:
            dLength = calculate_distance(pNode_source, pNode_target)
        eMode = self.insert_mode if mode is None else InsertMode(mode)
        return insert_edge(pyedge(pNode_source, pNode_target, dLength), eMode)

    def check_and_add_edge(self, pEdge: pyedge) -> bool:
        """Admit an edge between stored nodes under the strict policy."""
        self._require_members(pEdge.pNode_source, pEdge.pNode_target)
        return insert_edge(pEdge, InsertMode.STRICT)

    def connect_nodes(self, pNode_source: pymapnode, pNode_target: pymapnode, dLength: float) -> pyedge:
        """Unconditionally connect two stored nodes."""
        self._require_members(pNode_source, pNode_target)
        pEdge = pyedge(pNode_source, pNode_target, dLength)
        insert_edge(pEdge, InsertMode.UNCHECKED)
        return pEdge

    # ========================================================================
    # VALIDATION & STATISTICS
    # ========================================================================

    def validate_edge_consistency(self) -> EdgeValidationResult:
        """Run the consistency checker over every stored node."""
        return validate_edge_consistency(self.aNode)

    def get_graph_statistics(self) -> Dict[str, dict]:
        """Summary counts for nodes, edges and degrees."""
        return get_graph_statistics(self)
