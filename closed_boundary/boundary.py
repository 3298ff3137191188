"""
Closed boundary built from a set of ways.

Binds ring assembly and orientation into one immutable value. Typical
use:

    boundary = ClosedBoundary.build(ways)
    if boundary.is_clockwise():
        ...

Consumers that need the opposite winding build a new instance from
boundary.reversed_way_list().
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .models.geometry import Node, Way
from .processing.boundary_assembler import assemble_ways
from .processing.orientation import (
    Orientation,
    calculate_determinant,
    flatten_nodes,
    orientation_from_determinant,
)


@dataclass(frozen=True)
class ClosedBoundary:
    """
    A validated, closed ring of ways and its orientation.

    Attributes:
        way_list: Ordered ways; each end node is the next way's start node
            and the last end node is the first start node
        determinant: Signed orientation determinant (< 0 clockwise,
            > 0 counterclockwise, 0 indeterminate)
        leftover_ways: Ways not consumed by the ring, if the input held
            more than one boundary
    """
    way_list: Tuple[Way, ...]
    determinant: float
    leftover_ways: Tuple[Way, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, ways: Iterable[Way]) -> 'ClosedBoundary':
        """
        Assemble ways into a closed ring and compute its orientation.

        Args:
            ways: Unordered ways; iteration order breaks ties between
                competing next ways

        Returns:
            ClosedBoundary (empty with determinant 0 for empty input)

        Raises:
            BoundaryNotClosedError: If the ways do not form a closed ring
        """
        result = assemble_ways(ways)
        return cls(
            way_list=tuple(result.ways),
            determinant=calculate_determinant(result.ways),
            leftover_ways=tuple(result.leftover),
        )

    def is_clockwise(self) -> bool:
        """Check if the ring runs clockwise."""
        return self.determinant < 0

    def is_counterclockwise(self) -> bool:
        """Check if the ring runs counterclockwise."""
        return self.determinant > 0

    @property
    def orientation(self) -> Orientation:
        return orientation_from_determinant(self.determinant)

    @property
    def has_leftover_ways(self) -> bool:
        """Check for the 'Berlin (West)' condition."""
        return len(self.leftover_ways) > 0

    def reversed_way_list(self) -> List[Way]:
        """
        New list with the ring traversed the other way.

        Both the way order and each way's node order are reversed.
        """
        return [way.reversed() for way in reversed(self.way_list)]

    def nodes(self) -> List[Node]:
        """All ring nodes in order (shared endpoints appear twice)."""
        return flatten_nodes(self.way_list)


def build_closed_boundary(ways: Iterable[Way]) -> ClosedBoundary:
    """Build a ClosedBoundary from unordered ways."""
    return ClosedBoundary.build(ways)
