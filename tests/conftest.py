import pytest

from closed_boundary.models.geometry import Node, Way


def _make_way(*points):
    """Build a way from (id, lon, lat) tuples."""
    return Way([Node(node_id, lon, lat) for node_id, lon, lat in points])


def _ring_ways(points):
    """Chain consecutive (id, lon, lat) points into two-node ways, closing the ring."""
    closed = list(points) + [points[0]]
    return [_make_way(a, b) for a, b in zip(closed, closed[1:])]


@pytest.fixture
def make_way():
    return _make_way


@pytest.fixture
def ring_ways():
    return _ring_ways


@pytest.fixture
def unit_square_ways():
    # (0,0) -> (0,1) -> (1,1) -> (1,0) -> (0,0)
    return _ring_ways([("100", 0, 0), ("101", 0, 1), ("102", 1, 1), ("103", 1, 0)])


@pytest.fixture
def triangle_ways():
    return _ring_ways([("200", 0, 0), ("201", 0, 1), ("202", 1, 1)])


@pytest.fixture
def collinear_ways():
    return [
        _make_way(("300", 0, 0), ("301", 0, 1)),
        _make_way(("301", 0, 1), ("302", 0, 2)),
        _make_way(("302", 0, 2), ("303", 0, 1)),
        _make_way(("303", 0, 1), ("300", 0, 0)),
    ]


@pytest.fixture
def hand_crafted_ways():
    # Eight ways with mixed directions around a counterclockwise ring
    return [
        _make_way(("4", 14, 11), ("1", 10, 13)),
        _make_way(("4", 14, 11), ("2", 15, 4)),
        _make_way(("5", 10, 3), ("2", 15, 4)),
        _make_way(("5", 10, 3), ("8", 8, 1)),
        _make_way(("6", 4, 3), ("8", 8, 1)),
        _make_way(("6", 4, 3), ("3", 6, 5)),
        _make_way(("7", 5, 11), ("1", 10, 13)),
        _make_way(("7", 5, 11), ("3", 6, 5)),
    ]


@pytest.fixture
def square_osm():
    """Relation 100: ways 10 (outer) and 11 (empty role) share both endpoints; 12 is inner."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0.0" lon="0.0"/>
  <node id="2" lat="1.0" lon="0.0"/>
  <node id="3" lat="1.0" lon="1.0"/>
  <node id="4" lat="0.0" lon="1.0"/>
  <node id="5" lat="0.5" lon="1.2"/>
  <way id="10">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
  </way>
  <way id="11">
    <nd ref="1"/>
    <nd ref="4"/>
    <nd ref="3"/>
  </way>
  <way id="12">
    <nd ref="4"/>
    <nd ref="5"/>
  </way>
  <relation id="100">
    <member type="way" ref="10" role="outer"/>
    <member type="way" ref="11" role=""/>
    <member type="way" ref="12" role="inner"/>
    <member type="node" ref="1" role="admin_centre"/>
    <tag k="type" v="boundary"/>
    <tag k="boundary" v="administrative"/>
  </relation>
</osm>
"""


@pytest.fixture
def ring_osm():
    """Relation 7 closes a unit square; relation 8 leaves a gap."""
    return """<osm version="0.6">
  <node id="1" lat="0.0" lon="0.0"/>
  <node id="2" lat="1.0" lon="0.0"/>
  <node id="3" lat="1.0" lon="1.0"/>
  <node id="4" lat="0.0" lon="1.0"/>
  <way id="10"><nd ref="1"/><nd ref="2"/><nd ref="3"/></way>
  <way id="11"><nd ref="1"/><nd ref="4"/></way>
  <way id="12"><nd ref="3"/><nd ref="4"/></way>
  <relation id="7">
    <member type="way" ref="12" role="outer"/>
    <member type="way" ref="10" role="outer"/>
    <member type="way" ref="11" role="outer"/>
  </relation>
  <relation id="8">
    <member type="way" ref="10" role="outer"/>
    <member type="way" ref="11" role="outer"/>
  </relation>
</osm>
"""
