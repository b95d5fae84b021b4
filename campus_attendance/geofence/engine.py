"""Point-in-polygon containment for the campus geofence."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..core.exceptions import ValidationError

Vertex = Tuple[float, float]


@dataclass(frozen=True)
class Position:
    """A single location fix."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class GeofencePolygon:
    """Ordered (latitude, longitude) vertices, implicitly closed."""

    vertices: Tuple[Vertex, ...]

    def __post_init__(self):
        if len(self.vertices) < 3:
            raise ValidationError("A geofence polygon needs at least 3 vertices")

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "GeofencePolygon":
        return cls(tuple((float(lat), float(lon)) for lat, lon in points))

    def edges(self):
        sides = len(self.vertices)
        for i in range(sides):
            yield self.vertices[i], self.vertices[(i + 1) % sides]


def _on_segment(lat: float, lon: float, a: Vertex, b: Vertex) -> bool:
    (lat1, lon1), (lat2, lon2) = a, b
    if (lat2 - lat1) * (lon - lon1) != (lon2 - lon1) * (lat - lat1):
        return False
    return min(lat1, lat2) <= lat <= max(lat1, lat2) and min(lon1, lon2) <= lon <= max(lon1, lon2)


def contains(point: Position, polygon: GeofencePolygon) -> bool:
    """Ray-casting containment test. Points on an edge count as inside.

    The half-open latitude span skips horizontal edges and the upper end of
    each edge, so boundary points are settled by an exact on-segment check first.
    """
    lat, lon = point.latitude, point.longitude
    if any(_on_segment(lat, lon, a, b) for a, b in polygon.edges()):
        return True

    inside = False
    for (lat1, lon1), (lat2, lon2) in polygon.edges():
        if not (min(lat1, lat2) <= lat < max(lat1, lat2)) or lon > max(lon1, lon2):
            continue

        if lat1 != lat2:
            lon_intersect = (lat - lat1) * (lon2 - lon1) / (lat2 - lat1) + lon1
        else:
            lon_intersect = lon1

        if lon == lon_intersect:
            return True
        if lon < lon_intersect:
            inside = not inside

    return inside


class GeofenceEngine:
    """Binds the static campus polygon to the containment test."""

    def __init__(self, polygon: GeofencePolygon):
        self._polygon = polygon

    @property
    def polygon(self) -> GeofencePolygon:
        return self._polygon

    def is_within_campus(self, position: Position) -> bool:
        return contains(position, self._polygon)
