"""
Edge insertion for estuary map graphs.

All edges enter the graph through ``insert_edge``. Two modes exist:

- STRICT (``check_and_add_edge``): the admission path for derived or
  external input. Self-loops, duplicates, reverse duplicates and
  non-positive lengths are dropped without raising.
- UNCHECKED (``connect_nodes``): the trusted construction path. Every call
  appends, so A -> B and B -> A become two independent directed edges.

Accepted edges are appended to ``source.aEdge_out`` and, as an equal copy,
to ``target.aEdge_in`` with nothing in between.
"""

import logging
from enum import Enum
from typing import Optional

from ..classes.edge import pyedge
from ..classes.node import pymapnode
from ..classes.utils import is_valid_length

logger = logging.getLogger(__name__)


class InsertMode(Enum):
    """Insertion policies for ``insert_edge``."""
    STRICT = "strict"
    UNCHECKED = "unchecked"


def get_rejection_reason(pEdge: pyedge) -> Optional[str]:
    """
    Check an edge against the admission rules without mutating anything.

    Args:
        pEdge: Candidate edge

    Returns:
        A short reason if the edge would be rejected, otherwise None
    """
    pSource = pEdge.pNode_source
    pTarget = pEdge.pNode_target

    if pSource is pTarget:
        return "self-loop"
    if not is_valid_length(pEdge.dLength):
        return f"non-positive length {pEdge.dLength}"
    # edgesOut is canonical storage, so both directions are found from the
    # source side of each candidate pair
    if pSource.get_edge_to(pTarget) is not None:
        return "duplicate"
    if pTarget.get_edge_to(pSource) is not None:
        return "reverse duplicate"
    return None


def _append_edge(pEdge: pyedge) -> None:
    pEdge.pNode_source.aEdge_out.append(pEdge.copy())
    pEdge.pNode_target.aEdge_in.append(pEdge.copy())


def insert_edge(pEdge: pyedge, eMode: InsertMode = InsertMode.STRICT) -> bool:
    """
    Insert a directed edge under the given policy.

    Args:
        pEdge: Edge to insert; source and target must be valid nodes
        eMode: STRICT applies the admission rules, UNCHECKED always appends

    Returns:
        bool: True if the edge was added
    """
    if not isinstance(pEdge.pNode_source, pymapnode) or not isinstance(pEdge.pNode_target, pymapnode):
        raise TypeError("Edge endpoints must be pymapnode instances")

    if eMode == InsertMode.STRICT:
        sReason = get_rejection_reason(pEdge)
        if sReason is not None:
            logger.debug(f"Rejected edge {pEdge!r}: {sReason}")
            return False
    elif eMode == InsertMode.UNCHECKED:
        if pEdge.is_self_loop():
            logger.warning(f"Force-connecting self-loop on node {pEdge.pNode_source.lNodeID}")
    else:
        raise ValueError(f"Unknown insert mode: {eMode}")

    _append_edge(pEdge)
    return True


def check_and_add_edge(pEdge: pyedge) -> bool:
    """
    Admit an edge if the pair of nodes is not connected yet.

    The edge is silently dropped when it is a self-loop, when either
    direction between its endpoints already exists, or when its length is
    not a finite positive number. Repeating a call has no further effect.

    Args:
        pEdge: Candidate edge

    Returns:
        bool: True if the edge was added
    """
    return insert_edge(pEdge, InsertMode.STRICT)


def connect_nodes(pNode_source: pymapnode, pNode_target: pymapnode, dLength: float) -> pyedge:
    """
    Unconditionally connect two nodes with a directed edge.

    The caller is responsible for avoiding self-loops, duplicates and
    invalid lengths.

    Args:
        pNode_source: Node the edge leaves
        pNode_target: Node the edge enters
        dLength: Traversal length

    Returns:
        pyedge: The inserted edge
    """
    pEdge = pyedge(pNode_source, pNode_target, dLength)
    insert_edge(pEdge, InsertMode.UNCHECKED)
    return pEdge
