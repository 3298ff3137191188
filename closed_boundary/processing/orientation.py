"""
Orientation of an assembled boundary ring.

Instead of summing a full shoelace area over every vertex, the winding is
read from the determinant of up to four extremal nodes (westmost,
eastmost, southmost, northmost), taken in ring order. See
https://en.wikipedia.org/wiki/Curve_orientation

Sign convention:
    negative -> clockwise
    positive -> counterclockwise
    zero     -> collinear / indeterminate
"""

from enum import Enum
from typing import Callable, List, Sequence
import logging

from ..models.geometry import Node, Way

logger = logging.getLogger(__name__)


class Orientation(Enum):
    """Winding direction of a closed boundary."""
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
    COLLINEAR = "collinear"


def orientation_from_determinant(det: float) -> Orientation:
    """Map a determinant sign to an Orientation."""
    if det > 0:
        return Orientation.COUNTERCLOCKWISE
    if det < 0:
        return Orientation.CLOCKWISE
    return Orientation.COLLINEAR


def flatten_nodes(ways: Sequence[Way]) -> List[Node]:
    """Concatenate the node sequences of all ways, in order."""
    nodes: List[Node] = []
    for way in ways:
        nodes.extend(way.nodes)
    return nodes


def triangle_determinant(a: Node, b: Node, c: Node) -> float:
    """
    2D cross product determinant of three nodes (longitude = x, latitude = y).

    Returns:
        Twice the signed area of triangle abc
    """
    return (
        (b.longitude - a.longitude) * (c.latitude - a.latitude) -
        (c.longitude - a.longitude) * (b.latitude - a.latitude)
    )


def determinant_of_candidates(nodes: Sequence[Node]) -> float:
    """
    Determinant of the ordered candidate nodes.

    Uses the first three nodes. If they are collinear and a fourth
    candidate exists, the triples leaving out node 0, node 1 and node 2
    are tried in that order.

    Args:
        nodes: Up to four candidate nodes in ring order

    Returns:
        First non-zero determinant, or 0.0 if none is found
    """
    if nodes is None or len(nodes) < 3:
        return 0.0

    det = triangle_determinant(nodes[0], nodes[1], nodes[2])

    if det == 0 and len(nodes) == 4:
        for skip in range(3):
            triple = [n for i, n in enumerate(nodes) if i != skip]
            det = triangle_determinant(*triple)
            if det != 0:
                break

    return float(det)


def find_determinant_nodes(ways: Sequence[Way]) -> List[Node]:
    """
    Find the extremal candidate nodes, ordered as they appear in the ring.

    Candidates:
        - smallest longitude (ties: smallest latitude)
        - biggest longitude (ties: biggest latitude)
        - smallest latitude (ties: biggest longitude)
        - biggest latitude (ties: smallest longitude)

    Args:
        ways: Ordered ways of the ring

    Returns:
        Distinct candidate nodes (0 to 4) in first-appearance order
    """
    all_nodes = flatten_nodes(ways)
    if not all_nodes:
        return []

    candidates = {
        _extreme_node(all_nodes, lambda n, best: (
            n.longitude < best.longitude or
            (n.longitude == best.longitude and n.latitude < best.latitude)
        )),
        _extreme_node(all_nodes, lambda n, best: (
            n.longitude > best.longitude or
            (n.longitude == best.longitude and n.latitude > best.latitude)
        )),
        _extreme_node(all_nodes, lambda n, best: (
            n.latitude < best.latitude or
            (n.latitude == best.latitude and n.longitude > best.longitude)
        )),
        _extreme_node(all_nodes, lambda n, best: (
            n.latitude > best.latitude or
            (n.latitude == best.latitude and n.longitude < best.longitude)
        )),
    }

    # Keep ring order, otherwise the sign is meaningless
    ordered: List[Node] = []
    for node in all_nodes:
        if node in candidates and node not in ordered:
            ordered.append(node)

    _log_determinant_nodes(ordered)
    return ordered


def calculate_determinant(ways: Sequence[Way]) -> float:
    """
    Compute the orientation determinant of an assembled ring.

    Never raises; degenerate input (fewer than three distinct candidates,
    or all candidate triples collinear) yields 0.0.

    Args:
        ways: Ordered ways forming a closed ring

    Returns:
        Signed determinant (< 0 clockwise, > 0 counterclockwise)
    """
    det = determinant_of_candidates(find_determinant_nodes(ways))
    logger.debug(
        f"The determinant: {det:.2f} -> {orientation_from_determinant(det).value}"
    )
    return det


def _extreme_node(
    nodes: List[Node],
    is_better: Callable[[Node, Node], bool]
) -> Node:
    """Return the first node that no later node beats under is_better."""
    best = nodes[0]
    for node in nodes[1:]:
        if is_better(node, best):
            best = node
    return best


def _log_determinant_nodes(nodes: List[Node]) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return

    for node in nodes:
        logger.debug(
            f"Determinant node {node.id} ({node.longitude:.2f}/{node.latitude:.2f})"
        )
