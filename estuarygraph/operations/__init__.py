"""
Graph construction operations.

This module contains the edge insertion policies and the bulk builders that
translate loaded map records into insertion calls.
"""

from .insertion import InsertMode, insert_edge, check_and_add_edge, connect_nodes
from .builders import GraphBuilders

__all__ = [
    'InsertMode',
    'insert_edge',
    'check_and_add_edge',
    'connect_nodes',
    'GraphBuilders',
]
