"""
Map node: a point in the estuary graph with a habitat and a position.
"""

from typing import List, Optional, Tuple

from .edge import pyedge
from .habitat import HabitatType


class pymapnode:
    """
    Node of the estuary map.

    Each node owns two ordered adjacency lists:
    - aEdge_in: edges whose target is this node
    - aEdge_out: edges whose source is this node

    Both lists are views of the graph-wide edge set and are only meant to be
    mutated through the insertion functions in ``estuarygraph.operations.insertion``.
    Nodes hash and compare by identity.
    """

    def __init__(self, eHabitat: HabitatType, dX: float, dY: float, lNodeID: int = -1):
        """
        Initialize a map node.

        Args:
            eHabitat: Habitat classification
            dX: X coordinate
            dY: Y coordinate
            lNodeID: Node ID, -1 until the populating code assigns one
        """
        self.lNodeID = lNodeID
        self.eHabitat = HabitatType.from_name(eHabitat)
        self.dX = float(dX)
        self.dY = float(dY)
        self.aEdge_in: List[pyedge] = []
        self.aEdge_out: List[pyedge] = []

    @property
    def position(self) -> Tuple[float, float]:
        return (self.dX, self.dY)

    @property
    def in_degree(self) -> int:
        return len(self.aEdge_in)

    @property
    def out_degree(self) -> int:
        return len(self.aEdge_out)

    def get_edge_to(self, pNode_target: "pymapnode") -> Optional[pyedge]:
        """Outgoing edge to the given node, or None."""
        for pEdge in self.aEdge_out:
            if pEdge.pNode_target is pNode_target:
                return pEdge
        return None

    def get_edge_from(self, pNode_source: "pymapnode") -> Optional[pyedge]:
        """Incoming edge from the given node, or None."""
        for pEdge in self.aEdge_in:
            if pEdge.pNode_source is pNode_source:
                return pEdge
        return None

    def is_connected_to(self, pNode_other: "pymapnode") -> bool:
        """True if an edge joins the two nodes in either direction."""
        return self.get_edge_to(pNode_other) is not None or self.get_edge_from(pNode_other) is not None

    def __repr__(self):
        return (f"pymapnode(lNodeID={self.lNodeID}, eHabitat={self.eHabitat.value}, "
                f"dX={self.dX}, dY={self.dY})")
