"""
Directed edge between two map nodes.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import pymapnode


class pyedge:
    """
    A directed, length-weighted connection between two nodes.

    An edge is a value: the entry in the source's outgoing list and the entry
    in the target's incoming list are separate copies that compare equal.
    Endpoints are compared by identity.
    """

    __slots__ = ('pNode_source', 'pNode_target', 'dLength')

    def __init__(self, pNode_source: "pymapnode", pNode_target: "pymapnode", dLength: float):
        """
        Initialize an edge.

        Args:
            pNode_source: Node the edge leaves
            pNode_target: Node the edge enters
            dLength: Traversal length, expected to be positive
        """
        self.pNode_source = pNode_source
        self.pNode_target = pNode_target
        self.dLength = float(dLength)

    def copy(self) -> "pyedge":
        return pyedge(self.pNode_source, self.pNode_target, self.dLength)

    def reversed(self) -> "pyedge":
        """Edge in the opposite direction with the same length."""
        return pyedge(self.pNode_target, self.pNode_source, self.dLength)

    def is_self_loop(self) -> bool:
        return self.pNode_source is self.pNode_target

    def __eq__(self, other):
        if not isinstance(other, pyedge):
            return NotImplemented
        return (self.pNode_source is other.pNode_source
                and self.pNode_target is other.pNode_target
                and self.dLength == other.dLength)

    def __hash__(self):
        return hash((id(self.pNode_source), id(self.pNode_target), self.dLength))

    def __repr__(self):
        lSource = getattr(self.pNode_source, 'lNodeID', None)
        lTarget = getattr(self.pNode_target, 'lNodeID', None)
        return f"pyedge({lSource} -> {lTarget}, dLength={self.dLength})"
