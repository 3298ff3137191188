"""
Processing modules: ring assembly and orientation.
"""

from .boundary_assembler import (
    AssemblyResult,
    BoundaryError,
    BoundaryNotClosedError,
    assemble_ways,
)
from .orientation import (
    Orientation,
    calculate_determinant,
    determinant_of_candidates,
    find_determinant_nodes,
    flatten_nodes,
    orientation_from_determinant,
    triangle_determinant,
)

__all__ = [
    # Assembly
    'AssemblyResult',
    'BoundaryError',
    'BoundaryNotClosedError',
    'assemble_ways',
    # Orientation
    'Orientation',
    'calculate_determinant',
    'determinant_of_candidates',
    'find_determinant_nodes',
    'flatten_nodes',
    'orientation_from_determinant',
    'triangle_determinant',
]
