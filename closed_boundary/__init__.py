"""
Closed Boundary

Builds a single closed ring from unordered boundary ways (for example the
separately maintained segments of an administrative border) and tells
whether it runs clockwise or counterclockwise.

Can be used as:
- Library: ClosedBoundary.build(ways)
- CLI tool: python -m closed_boundary.main
"""

__version__ = "1.0.0"

from .models.geometry import Node, Way, EndpointKey
from .processing.boundary_assembler import (
    AssemblyResult,
    BoundaryError,
    BoundaryNotClosedError,
    assemble_ways,
)
from .processing.orientation import Orientation, calculate_determinant
from .boundary import ClosedBoundary, build_closed_boundary

__all__ = [
    'Node',
    'Way',
    'EndpointKey',
    'AssemblyResult',
    'BoundaryError',
    'BoundaryNotClosedError',
    'assemble_ways',
    'Orientation',
    'calculate_determinant',
    'ClosedBoundary',
    'build_closed_boundary',
]
