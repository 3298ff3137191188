import pytest

from closed_boundary import ClosedBoundary
from closed_boundary.io.osm_parser import (
    OSMParseError,
    OSMWay,
    parse_osm_file,
    parse_osm_string,
    relation_ways,
)


def test_parse_string_collects_elements(square_osm):
    data = parse_osm_string(square_osm)
    assert set(data.nodes) == {"1", "2", "3", "4", "5"}
    assert data.nodes["2"].lat == 1.0
    assert data.ways["10"].node_ids == ["1", "2", "3"]
    relation = data.relations["100"]
    assert relation.tags["boundary"] == "administrative"
    assert ("way", "11", "") in relation.members


def test_parse_file(tmp_path, square_osm):
    path = tmp_path / "square.osm"
    path.write_text(square_osm, encoding="utf-8")
    data = parse_osm_file(str(path))
    assert len(data.ways) == 3


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSMParseError):
        parse_osm_file(str(tmp_path / "missing.osm"))


def test_invalid_xml_raises():
    with pytest.raises(OSMParseError):
        parse_osm_string("<osm><node></osm>")


def test_relation_ways_uses_outer_roles_by_default(square_osm):
    data = parse_osm_string(square_osm)
    ways = relation_ways(data, "100")
    assert [w.endpoint_key for w in ways] == [("1", "3"), ("1", "3")]
    # longitude is x, latitude is y
    assert ways[0].nodes[1].longitude == 0.0
    assert ways[0].nodes[1].latitude == 1.0


def test_relation_ways_with_explicit_roles(square_osm):
    data = parse_osm_string(square_osm)
    ways = relation_ways(data, 100, roles=["inner"])
    assert [w.endpoint_key for w in ways] == [("4", "5")]


def test_unknown_relation_raises(square_osm):
    data = parse_osm_string(square_osm)
    with pytest.raises(OSMParseError, match="999"):
        relation_ways(data, "999")


def test_missing_members_are_skipped(caplog, square_osm):
    data = parse_osm_string(square_osm)
    data.relations["100"].members.append(("way", "404", "outer"))
    data.ways["13"] = OSMWay("13", ["4", "404"])
    data.relations["100"].members.append(("way", "13", "outer"))

    ways = relation_ways(data, "100")

    assert len(ways) == 2
    assert "Way 404" in caplog.text
    assert "fewer than 2" in caplog.text


def test_relation_ways_build_a_boundary(square_osm):
    data = parse_osm_string(square_osm)
    # Ways 10 and 11 share both endpoints, so build from distinct directions
    ways = relation_ways(data, "100")
    boundary = ClosedBoundary.build([ways[0], ways[1].reversed()])
    # 1 -> 2 -> 3 -> 4 -> 1 runs up the west side first
    assert boundary.is_clockwise()
