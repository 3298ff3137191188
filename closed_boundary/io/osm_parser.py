"""
OSM XML reader for boundary relations.

Parses OpenStreetMap XML and turns the member ways of a boundary
relation (e.g. an administrative border) into Way values ready for
ClosedBoundary.build().
"""

import xml.etree.ElementTree as ET
from typing import Dict, Iterable, List, Tuple
from dataclasses import dataclass, field
import logging

from ..models.geometry import Node, Way
from ..processing.boundary_assembler import BoundaryError
from ..config import DEFAULT_MEMBER_ROLES

logger = logging.getLogger(__name__)


class OSMParseError(BoundaryError):
    """Raised when OSM data cannot be read or a relation is missing."""
    pass


@dataclass
class OSMNode:
    """An OSM node with geographic coordinates."""
    id: str
    lat: float
    lon: float


@dataclass
class OSMWay:
    """An OSM way with node references and tags."""
    id: str
    node_ids: List[str]
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class OSMRelation:
    """An OSM relation with members and tags."""
    id: str
    members: List[Tuple[str, str, str]]  # (type, ref, role)
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class OSMData:
    """Nodes, ways and relations of a parsed OSM document, keyed by id."""
    nodes: Dict[str, OSMNode] = field(default_factory=dict)
    ways: Dict[str, OSMWay] = field(default_factory=dict)
    relations: Dict[str, OSMRelation] = field(default_factory=dict)


def parse_osm_file(filepath: str) -> OSMData:
    """
    Parse an OSM XML file.

    Args:
        filepath: Path to .osm XML file

    Returns:
        OSMData with all nodes, ways and relations

    Raises:
        OSMParseError: If the file cannot be parsed
    """
    logger.info(f"Parsing OSM file: {filepath}")

    try:
        tree = ET.parse(filepath)
    except (ET.ParseError, OSError) as e:
        raise OSMParseError(f"Cannot read OSM file {filepath}: {e}") from e

    return _parse_root(tree.getroot())


def parse_osm_string(text: str) -> OSMData:
    """Parse OSM XML held in a string."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise OSMParseError(f"Invalid OSM XML: {e}") from e

    return _parse_root(root)


def _parse_root(root: ET.Element) -> OSMData:
    data = OSMData()

    for node_elem in root.findall('node'):
        node_id = node_elem.get('id')
        try:
            lat = float(node_elem.get('lat'))
            lon = float(node_elem.get('lon'))
        except (TypeError, ValueError):
            logger.warning(f"Node {node_id} has no valid coordinates, skipping")
            continue
        data.nodes[node_id] = OSMNode(node_id, lat, lon)

    logger.debug(f"Parsed {len(data.nodes)} nodes")

    for way_elem in root.findall('way'):
        way_id = way_elem.get('id')
        node_ids = [nd.get('ref') for nd in way_elem.findall('nd')]
        tags = {tag.get('k'): tag.get('v') for tag in way_elem.findall('tag')}
        data.ways[way_id] = OSMWay(way_id, node_ids, tags)

    logger.debug(f"Parsed {len(data.ways)} ways")

    for rel_elem in root.findall('relation'):
        rel_id = rel_elem.get('id')
        members = [
            (m.get('type'), m.get('ref'), m.get('role', ''))
            for m in rel_elem.findall('member')
        ]
        tags = {tag.get('k'): tag.get('v') for tag in rel_elem.findall('tag')}
        data.relations[rel_id] = OSMRelation(rel_id, members, tags)

    logger.debug(f"Parsed {len(data.relations)} relations")

    return data


def relation_ways(
    data: OSMData,
    relation_id: str,
    roles: Iterable[str] = DEFAULT_MEMBER_ROLES
) -> List[Way]:
    """
    Resolve the member ways of a relation into Way values.

    Members whose role is not in roles are ignored. Missing ways and
    nodes are logged and skipped; a way left with fewer than two nodes
    is dropped.

    Args:
        data: Parsed OSM data
        relation_id: Relation to resolve
        roles: Member roles to include

    Returns:
        Ways in member order

    Raises:
        OSMParseError: If the relation does not exist
    """
    relation_id = str(relation_id)
    relation = data.relations.get(relation_id)
    if relation is None:
        raise OSMParseError(f"Relation {relation_id} not found")

    roles = set(roles)
    result: List[Way] = []

    for member_type, ref, role in relation.members:
        if member_type != 'way' or role not in roles:
            continue

        osm_way = data.ways.get(ref)
        if osm_way is None:
            logger.warning(f"Way {ref} referenced in relation {relation_id} not found")
            continue

        nodes: List[Node] = []
        for node_id in osm_way.node_ids:
            osm_node = data.nodes.get(node_id)
            if osm_node is None:
                logger.warning(f"Node {node_id} not found for way {ref}")
                continue
            nodes.append(Node(node_id, osm_node.lon, osm_node.lat))

        if len(nodes) < 2:
            logger.warning(f"Way {ref} has fewer than 2 resolvable nodes, skipping")
            continue

        result.append(Way(nodes))

    logger.info(f"Relation {relation_id}: {len(result)} member ways with roles {sorted(roles)}")
    return result
