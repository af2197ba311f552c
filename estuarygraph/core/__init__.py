"""
Core graph data structures and management.

This module contains the node store and the graph-level construction API.
"""

from .graph import MapGraph

__all__ = ['MapGraph']
