"""
Consistency checking for incoming/outgoing adjacency lists.

The checker is run on demand, after loading or in tests. Insertion itself
performs no graph-wide checks.
"""

import logging
from typing import Iterable, List

from ..classes.node import pymapnode

logger = logging.getLogger(__name__)


class EdgeConsistencyError(ValueError):
    """Raised by EdgeValidationResult.raise_if_failed when checks failed."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} edge consistency error(s): " + "; ".join(self.errors))


class EdgeValidationResult:
    """Outcome of validate_edge_consistency."""

    def __init__(self):
        self.passed = True
        self.total_nodes = 0
        self.total_unique_edges = 0
        self.errors: List[str] = []

    def fail(self, message: str):
        self.passed = False
        self.errors.append(message)

    def raise_if_failed(self):
        if not self.passed:
            raise EdgeConsistencyError(self.errors)

    def to_dict(self) -> dict:
        return {
            'is_valid': self.passed,
            'issues': list(self.errors),
            'statistics': {
                'total_nodes': self.total_nodes,
                'total_unique_edges': self.total_unique_edges,
            },
        }


def validate_edge_consistency(nodes: Iterable[pymapnode]) -> EdgeValidationResult:
    """
    Check adjacency invariants over a set of nodes.

    Checks, per node:
    - incoming entries target the node, outgoing entries leave it
    - no self-loops
    - every endpoint belongs to the supplied nodes
    - at most one incoming entry per source and one outgoing entry per target
    - each outgoing entry has a matching incoming entry on the target, and
      the reverse
    - lengths are positive

    Args:
        nodes: The nodes making up the map

    Returns:
        EdgeValidationResult with every violation found
    """
    aNode = list(nodes)
    result = EdgeValidationResult()
    result.total_nodes = len(aNode)

    # identity set; nodes hash by identity
    node_set = set(aNode)
    nEdge_slots = 0

    for node in aNode:
        lID = node.lNodeID

        for i, edge in enumerate(node.aEdge_in):
            if edge.pNode_target is not node:
                result.fail(f"Node {lID}: edgesIn[{i}].target != this node")

        for i, edge in enumerate(node.aEdge_out):
            if edge.pNode_source is not node:
                result.fail(f"Node {lID}: edgesOut[{i}].source != this node")

        for edge in node.aEdge_in:
            if edge.pNode_source is node:
                result.fail(f"Node {lID}: self-loop in edgesIn")
        for edge in node.aEdge_out:
            if edge.pNode_target is node:
                result.fail(f"Node {lID}: self-loop in edgesOut")

        for edge in node.aEdge_in:
            if edge.pNode_source not in node_set:
                result.fail(f"Node {lID}: edgesIn references source not in map")
        for edge in node.aEdge_out:
            if edge.pNode_target not in node_set:
                result.fail(f"Node {lID}: edgesOut references target not in map")

        seen = set()
        for edge in node.aEdge_in:
            if edge.pNode_source in seen:
                result.fail(f"Node {lID}: duplicate edgesIn from source {edge.pNode_source.lNodeID}")
            seen.add(edge.pNode_source)

        seen = set()
        for edge in node.aEdge_out:
            if edge.pNode_target in seen:
                result.fail(f"Node {lID}: duplicate edgesOut to target {edge.pNode_target.lNodeID}")
            seen.add(edge.pNode_target)

        # symmetry
        for edge in node.aEdge_out:
            if edge.pNode_target.get_edge_from(node) is None:
                result.fail(f"Node {lID}: edgesOut to {edge.pNode_target.lNodeID}"
                            f" but target has no matching edgesIn")
        for edge in node.aEdge_in:
            if edge.pNode_source.get_edge_to(node) is None:
                result.fail(f"Node {lID}: edgesIn from {edge.pNode_source.lNodeID}"
                            f" but source has no matching edgesOut")

        for edge in node.aEdge_in:
            if not edge.dLength > 0.0:
                result.fail(f"Node {lID}: edgesIn has non-positive length {edge.dLength}")
        for edge in node.aEdge_out:
            if not edge.dLength > 0.0:
                result.fail(f"Node {lID}: edgesOut has non-positive length {edge.dLength}")

        nEdge_slots += len(node.aEdge_out)

    # aEdge_out is canonical: each directed edge A -> B appears once in A.aEdge_out
    result.total_unique_edges = nEdge_slots

    if result.passed:
        logger.debug(f"Edge consistency passed for {result.total_nodes} nodes, {nEdge_slots} edges")
    else:
        logger.warning(f"Edge consistency failed with {len(result.errors)} error(s)")

    return result
