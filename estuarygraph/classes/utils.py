"""
Utility functions for estuarygraph.

Geometric helpers shared by the graph store and the builders.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def calculate_distance(pNode_a, pNode_b) -> float:
    """
    Euclidean distance between two nodes.

    Args:
        pNode_a: First node
        pNode_b: Second node

    Returns:
        Distance in map units
    """
    return float(np.hypot(pNode_b.dX - pNode_a.dX, pNode_b.dY - pNode_a.dY))


def is_valid_length(dLength) -> bool:
    """True if the length is a finite number greater than zero."""
    try:
        dValue = float(dLength)
    except (TypeError, ValueError):
        return False
    return bool(np.isfinite(dValue)) and dValue > 0.0
