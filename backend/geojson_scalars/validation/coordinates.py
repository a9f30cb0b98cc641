"""Coordinate-shape checks for the six GeoJSON geometry types.

A coordinate tree is described by its nesting depth above the Position level.
``check_coordinates`` walks the tree generically and ``GEOMETRY_RULES`` holds
the per-type parameters, so adding or changing a geometry rule never touches
the recursion.
"""
from collections.abc import Iterator
from dataclasses import dataclass
from geojson_scalars.core.constants import LINEAR_RING_MIN_POSITIONS, POSITION_MIN_LENGTH
from geojson_scalars.enums import GeoJSONType
from numbers import Real
from typing import Any


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_closed(ring: list | tuple) -> bool:
    first, last = ring[0], ring[-1]
    if not is_array(first) or not is_array(last) or len(first) != len(last):
        return False
    return all(a == b for a, b in zip(first, last))


def check_coordinates(value: Any, depth: int, min_count: int = 0, is_ring: bool = False) -> bool:
    """Return whether ``value`` is a coordinate tree of exactly ``depth`` levels.

    At depth 0 the value must be a Position: an array of at least two numbers.
    Above that every level must hold at least ``min_count`` elements. With
    ``is_ring`` the level right above the Positions must also be a closed
    linear ring. Never raises.
    """
    if not is_array(value):
        return False

    if depth == 0:
        return len(value) >= POSITION_MIN_LENGTH and all(is_number(item) for item in value)

    if len(value) < min_count:
        return False

    if depth == 1 and is_ring:
        if not value or not _is_closed(value):
            return False
        if len(value) < LINEAR_RING_MIN_POSITIONS:
            return False

    return all(check_coordinates(item, depth - 1, min_count, is_ring) for item in value)


@dataclass(frozen=True)
class CoordinateRule:
    depth: int
    min_count: int
    message: str
    is_ring: bool = False

    def check(self, value: Any) -> bool:
        return check_coordinates(value, self.depth, self.min_count, self.is_ring)


@dataclass(frozen=True)
class GeometryRule:
    shape: CoordinateRule
    # levels to peel off the coordinates before reaching linear rings
    ring_level: int | None = None


RING_RULE = CoordinateRule(
    depth=1,
    min_count=LINEAR_RING_MIN_POSITIONS,
    message='Each linear ring in a Polygon must have at least four positions and must be closed.',
    is_ring=True,
)

GEOMETRY_RULES: dict[GeoJSONType, GeometryRule] = {
    GeoJSONType.POINT: GeometryRule(
        shape=CoordinateRule(0, 0, 'Point must have coordinates as [x, y] or [x, y, z].'),
    ),
    GeoJSONType.MULTI_POINT: GeometryRule(
        shape=CoordinateRule(1, 1, 'MultiPoint must have coordinates as an array of [x, y] or [x, y, z].'),
    ),
    GeoJSONType.LINE_STRING: GeometryRule(
        shape=CoordinateRule(1, 2, 'LineString must have coordinates as an array of two or more [x, y].'),
    ),
    GeoJSONType.MULTI_LINE_STRING: GeometryRule(
        shape=CoordinateRule(2, 1, 'MultiLineString must have coordinates as an array of LineString coordinate arrays.'),
    ),
    GeoJSONType.POLYGON: GeometryRule(
        shape=CoordinateRule(2, 1, 'Polygon must have coordinates as an array of linear rings.'),
        ring_level=1,
    ),
    GeoJSONType.MULTI_POLYGON: GeometryRule(
        shape=CoordinateRule(3, 1, 'MultiPolygon must have coordinates as an array of Polygon coordinate arrays.'),
        ring_level=2,
    ),
}


def iter_rings(coordinates: list | tuple, ring_level: int) -> Iterator[Any]:
    """Yield the linear rings of an already shape-checked coordinate tree, in array order."""
    if ring_level <= 1:
        yield from coordinates
        return
    for item in coordinates:
        yield from iter_rings(item, ring_level - 1)
