"""
Input modules: reading boundary ways from OSM data.
"""

from .osm_parser import (
    OSMNode,
    OSMWay,
    OSMRelation,
    OSMData,
    OSMParseError,
    parse_osm_file,
    parse_osm_string,
    relation_ways,
)

__all__ = [
    'OSMNode',
    'OSMWay',
    'OSMRelation',
    'OSMData',
    'OSMParseError',
    'parse_osm_file',
    'parse_osm_string',
    'relation_ways',
]
