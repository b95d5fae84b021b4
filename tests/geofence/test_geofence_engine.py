from __future__ import annotations

import random

import pytest

from campus_attendance.core.constants import DEFAULT_CAMPUS_POLYGON
from campus_attendance.core.exceptions import ValidationError
from campus_attendance.geofence.engine import GeofenceEngine, GeofencePolygon, Position, contains

SQUARE = GeofencePolygon.from_points([(0, 0), (0, 10), (10, 10), (10, 0)])

# Concave "U": the notch at latitude 4..6, longitude above 4, is outside
U_SHAPE = GeofencePolygon.from_points(
    [(0, 0), (10, 0), (10, 10), (6, 10), (6, 4), (4, 4), (4, 10), (0, 10)]
)


def winding_number_inside(lat: float, lon: float, vertices) -> bool:
    """Independent oracle (winding number) for points strictly off the boundary."""
    wn = 0
    n = len(vertices)
    for i in range(n):
        y1, x1 = vertices[i]
        y2, x2 = vertices[(i + 1) % n]
        cross = (x2 - x1) * (lat - y1) - (lon - x1) * (y2 - y1)
        if y1 <= lat:
            if y2 > lat and cross > 0:
                wn += 1
        elif y2 <= lat and cross < 0:
            wn -= 1
    return wn != 0


def test_square_scenarios():
    assert contains(Position(5, 5), SQUARE)
    assert not contains(Position(15, 15), SQUARE)
    assert contains(Position(0, 5), SQUARE)


@pytest.mark.parametrize("point", [(10, 5), (5, 0), (5, 10), (3, 0)])
def test_edge_points_count_as_inside(point):
    assert contains(Position(*point), SQUARE)


def test_concave_notch_is_outside():
    assert not contains(Position(5, 8), U_SHAPE)
    assert contains(Position(2, 8), U_SHAPE)
    assert contains(Position(5, 2), U_SHAPE)


@pytest.mark.parametrize("polygon", [SQUARE, U_SHAPE, GeofencePolygon.from_points(DEFAULT_CAMPUS_POLYGON)])
def test_agrees_with_oracle_on_random_points(polygon):
    rng = random.Random(42)
    lats = [v[0] for v in polygon.vertices]
    lons = [v[1] for v in polygon.vertices]
    pad_lat = (max(lats) - min(lats)) * 0.25
    pad_lon = (max(lons) - min(lons)) * 0.25

    for _ in range(10_000):
        lat = rng.uniform(min(lats) - pad_lat, max(lats) + pad_lat)
        lon = rng.uniform(min(lons) - pad_lon, max(lons) + pad_lon)
        assert contains(Position(lat, lon), polygon) == winding_number_inside(lat, lon, polygon.vertices)


def test_invariant_under_vertex_rotation():
    rng = random.Random(7)
    points = [Position(rng.uniform(-2, 12), rng.uniform(-2, 12)) for _ in range(500)]
    points += [Position(0, 5), Position(5, 0), Position(10, 10)]

    base = U_SHAPE.vertices
    expected = [contains(p, U_SHAPE) for p in points]
    for k in range(1, len(base)):
        rotated = GeofencePolygon(base[k:] + base[:k])
        assert [contains(p, rotated) for p in points] == expected


def test_campus_engine():
    engine = GeofenceEngine(GeofencePolygon.from_points(DEFAULT_CAMPUS_POLYGON))

    assert engine.is_within_campus(Position(30.6313, 76.7243))
    assert not engine.is_within_campus(Position(30.7333, 76.7794))


def test_polygon_needs_three_vertices():
    with pytest.raises(ValidationError):
        GeofencePolygon.from_points([(0, 0), (1, 1)])
