"""
Core geometry types for the closed boundary builder.

Provides Node and Way, the immutable building blocks that boundary
assembly and orientation work on.
"""

from dataclasses import dataclass, field
from typing import Hashable, NamedTuple, Tuple


@dataclass(frozen=True, slots=True)
class Node:
    """
    A point with an identity key and geographic coordinates.

    Equality and hashing use the id only. Two nodes with the same id are
    the same point even if their coordinates differ; callers must keep
    ids unique per location.
    """
    id: Hashable
    longitude: float = field(compare=False)
    latitude: float = field(compare=False)

    def __post_init__(self):
        if self.id is None:
            raise ValueError("Node id must not be None")


class EndpointKey(NamedTuple):
    """Directed (start id, end id) pair identifying a way in the assembly pool."""
    start_id: Hashable
    end_id: Hashable


@dataclass(frozen=True, slots=True)
class Way:
    """
    An ordered sequence of at least two nodes (one directed polyline).

    Attributes:
        nodes: Nodes in traversal order
    """
    nodes: Tuple[Node, ...]

    def __post_init__(self):
        object.__setattr__(self, 'nodes', tuple(self.nodes))
        if len(self.nodes) < 2:
            raise ValueError(
                f"A way needs at least two nodes, got {len(self.nodes)}"
            )
        for node in self.nodes:
            if not isinstance(node, Node):
                raise TypeError(f"Way nodes must be Node instances, got {type(node).__name__}")

    @property
    def start_node(self) -> Node:
        """First node."""
        return self.nodes[0]

    @property
    def end_node(self) -> Node:
        """Last node."""
        return self.nodes[-1]

    @property
    def is_closed(self) -> bool:
        """Check if the way starts and ends at the same node."""
        return self.start_node == self.end_node

    @property
    def endpoint_key(self) -> EndpointKey:
        """Directed endpoint pair, used for pool lookup and de-duplication."""
        return EndpointKey(self.start_node.id, self.end_node.id)

    def reversed(self) -> 'Way':
        """Return a new way with the node order reversed."""
        return Way(self.nodes[::-1])
