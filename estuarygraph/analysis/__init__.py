"""
Analysis modules for checking and summarising map graphs.
"""

from .validation import EdgeConsistencyError, EdgeValidationResult, validate_edge_consistency
from .statistics import get_graph_statistics

__all__ = [
    'EdgeConsistencyError',
    'EdgeValidationResult',
    'validate_edge_consistency',
    'get_graph_statistics',
]
