"""
Core data classes for estuary map representation.

This module contains the fundamental data structures used throughout
the estuarygraph library.
"""

from .habitat import HabitatType
from .edge import pyedge
from .node import pymapnode

__all__ = [
    'HabitatType',
    'pyedge',
    'pymapnode',
]
