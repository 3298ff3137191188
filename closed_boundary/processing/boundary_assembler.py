"""
Boundary assembler for unordered ways.

Boundary ways (e.g. the outer members of an administrative boundary
relation) arrive unordered and with mixed directions. This module chains
them end-to-start into a single ordered ring, reversing ways where
needed, and validates that the ring closes.
"""

from typing import Dict, Iterable, List, Optional, Set
from dataclasses import dataclass, field
import logging

from ..models.geometry import EndpointKey, Node, Way

logger = logging.getLogger(__name__)


class BoundaryError(Exception):
    """Base class for boundary building failures."""
    pass


class BoundaryNotClosedError(BoundaryError):
    """Raised when the assembled way chain does not form a closed ring."""
    pass


@dataclass
class AssemblyResult:
    """
    Result of assembling ways into a ring.

    Attributes:
        ways: Ordered ways; each way's end node is the next way's start node
        leftover: Ways that were not consumed by the ring (possible
            additional disjoint boundaries)
    """
    ways: List[Way] = field(default_factory=list)
    leftover: List[Way] = field(default_factory=list)

    @property
    def has_leftover(self) -> bool:
        """Check if some ways were not used by the ring."""
        return len(self.leftover) > 0


class _WayPool:
    """
    Removable pool of ways indexed by endpoint node id.

    Lookups return the first unused way in insertion order, so the
    caller's ordering decides between competing candidates.
    """

    def __init__(self, ways: Iterable[Way]):
        self._ways: List[Way] = []
        self._used: Set[int] = set()
        # node id -> way indices, in insertion order
        self._by_start: Dict[object, List[int]] = {}
        self._by_end: Dict[object, List[int]] = {}

        seen: Set[EndpointKey] = set()
        for way in ways:
            key = way.endpoint_key
            if key in seen:
                logger.debug(f"Skipping way with duplicate endpoints {key.start_id} -> {key.end_id}")
                continue
            seen.add(key)

            idx = len(self._ways)
            self._ways.append(way)
            self._by_start.setdefault(key.start_id, []).append(idx)
            self._by_end.setdefault(key.end_id, []).append(idx)

    def __len__(self) -> int:
        return len(self._ways) - len(self._used)

    def pop_first(self) -> Way:
        """Remove and return the first unused way."""
        for idx, way in enumerate(self._ways):
            if idx not in self._used:
                self._used.add(idx)
                return way
        raise IndexError("pop from empty way pool")

    def pop_starting_at(self, node: Node) -> Optional[Way]:
        """Remove and return the first unused way starting at node."""
        return self._pop_from(self._by_start, node)

    def pop_ending_at(self, node: Node) -> Optional[Way]:
        """Remove and return the first unused way ending at node."""
        return self._pop_from(self._by_end, node)

    def remaining(self) -> List[Way]:
        """Unused ways in insertion order."""
        return [way for idx, way in enumerate(self._ways) if idx not in self._used]

    def _pop_from(self, index: Dict[object, List[int]], node: Node) -> Optional[Way]:
        for idx in index.get(node.id, ()):
            if idx in self._used:
                continue
            self._used.add(idx)
            return self._ways[idx]
        return None


def assemble_ways(ways: Iterable[Way]) -> AssemblyResult:
    """
    Chain ways into a single closed ring.

    Algorithm:
    1. Start with the first way of the pool
    2. Find an unused way starting at the current end node; otherwise
       find one ending there and reverse it
    3. Repeat until the pool is empty or no next way exists
    4. Validate that the last end node equals the first start node

    Args:
        ways: Ways to assemble; iteration order breaks ties. The
            collection itself is not modified.

    Returns:
        AssemblyResult with the ordered ways and any leftover ways

    Raises:
        BoundaryNotClosedError: If the chain does not close
    """
    pool = _WayPool(ways)
    ordered: List[Way] = []

    if not len(pool):
        return AssemblyResult()

    current: Optional[Way] = pool.pop_first()
    ordered.append(current)

    while len(pool) and current is not None:
        current = _find_next_way(pool, current.end_node)
        if current is not None:
            ordered.append(current)

    if ordered[0].start_node != ordered[-1].end_node:
        raise BoundaryNotClosedError("Boundary is not closed")

    leftover = pool.remaining()
    if leftover:
        logger.warning(
            f"There are still {len(leftover)} ways left over, "
            f"we might have a 'Berlin (West)' problem"
        )

    _log_ways(ordered)
    return AssemblyResult(ordered, leftover)


def _find_next_way(pool: _WayPool, node: Node) -> Optional[Way]:
    """
    Take the next way connecting to node out of the pool.

    A way ending at node is returned reversed so that it starts there.
    """
    way = pool.pop_starting_at(node)
    if way is not None:
        return way

    way = pool.pop_ending_at(node)
    if way is not None:
        return way.reversed()

    logger.debug(f"No next way found for node {node.id}")
    return None


def _log_ways(ways: List[Way]) -> None:
    """Log all ways in ring order."""
    if not logger.isEnabledFor(logging.DEBUG):
        return

    for way in ways:
        start, end = way.start_node, way.end_node
        logger.debug(
            f"Way {start.id} ({start.longitude:.2f}/{start.latitude:.2f}) -> "
            f"{end.id} ({end.longitude:.2f}/{end.latitude:.2f})"
        )
