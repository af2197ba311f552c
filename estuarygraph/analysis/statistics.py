"""
Summary statistics for map graphs.
"""

import logging
from typing import Dict

import numpy as np

from ..classes.habitat import HabitatType

logger = logging.getLogger(__name__)


def get_graph_statistics(map_graph) -> Dict[str, dict]:
    """
    Get statistics about the graph structure.

    Args:
        map_graph: MapGraph instance

    Returns:
        Dictionary containing node, edge and degree statistics
    """
    aNode = map_graph.get_nodes()
    aIn = np.array([pNode.in_degree for pNode in aNode], dtype=int)
    aOut = np.array([pNode.out_degree for pNode in aNode], dtype=int)

    habitats = {eHabitat.value: 0 for eHabitat in HabitatType}
    for pNode in aNode:
        habitats[pNode.eHabitat.value] += 1

    stats = {
        'nodes': {
            'total': len(aNode),
            'sources': int(np.count_nonzero(aIn == 0)),
            'sinks': int(np.count_nonzero(aOut == 0)),
            'isolated': int(np.count_nonzero((aIn == 0) & (aOut == 0))),
            'habitats': habitats,
        },
        'edges': {
            'total': int(aOut.sum()),
        },
        'connectivity': {
            'avg_out_degree': float(aOut.mean()) if aOut.size else 0.0,
            'avg_in_degree': float(aIn.mean()) if aIn.size else 0.0,
            'max_out_degree': int(aOut.max()) if aOut.size else 0,
            'max_in_degree': int(aIn.max()) if aIn.size else 0,
        },
    }

    logger.debug(f"Computed statistics for {len(aNode)} nodes")
    return stats
