from collections.abc import Mapping
from geojson_scalars.core.exceptions import (
    GeoJSONValidationError,
    MalformedCoordinatesError,
    MissingRequiredFieldError,
    NestingTooDeepError,
    TypeMismatchError,
    UnclosedRingError,
    UnknownTypeError,
)
from geojson_scalars.core.settings import Settings
from geojson_scalars.enums import GeoJSONType
from geojson_scalars.validation.coordinates import GEOMETRY_RULES, RING_RULE, is_array, iter_rings
from typing import Any


def _is_blank(value: Any) -> bool:
    return value is None or (is_array(value) and len(value) == 0)


def _validate_geometry(geojson_type: GeoJSONType, geojson: Mapping) -> None:
    coordinates = geojson.get('coordinates')
    if _is_blank(coordinates):
        raise MissingRequiredFieldError(geojson_type.value, 'coordinates')

    rule = GEOMETRY_RULES[geojson_type]
    if not rule.shape.check(coordinates):
        raise MalformedCoordinatesError(rule.shape.message)

    if rule.ring_level is not None:
        for ring in iter_rings(coordinates, rule.ring_level):
            if not RING_RULE.check(ring):
                raise UnclosedRingError(RING_RULE.message)


def _validate_members(geojson_type: GeoJSONType, geojson: Mapping, field_name: str, level: int, max_depth: int) -> None:
    members = geojson.get(field_name)
    if members is None:
        raise MissingRequiredFieldError(geojson_type.value, field_name)
    if not is_array(members):
        raise MissingRequiredFieldError(geojson_type.value, field_name, expect_array=True)

    for member in members:
        _validate(member, level + 1, max_depth)


def _validate(value: Any, level: int, max_depth: int) -> None:
    if level > max_depth:
        raise NestingTooDeepError(max_depth)

    if not isinstance(value, Mapping):
        raise UnknownTypeError.not_an_object()

    type_name = value.get('type')
    geojson_type = GeoJSONType.lookup(type_name)

    match geojson_type:
        case (
            GeoJSONType.POINT
            | GeoJSONType.MULTI_POINT
            | GeoJSONType.LINE_STRING
            | GeoJSONType.MULTI_LINE_STRING
            | GeoJSONType.POLYGON
            | GeoJSONType.MULTI_POLYGON
        ):
            _validate_geometry(geojson_type, value)
        case GeoJSONType.GEOMETRY_COLLECTION:
            _validate_members(geojson_type, value, 'geometries', level, max_depth)
        case GeoJSONType.FEATURE_COLLECTION:
            _validate_members(geojson_type, value, 'features', level, max_depth)
        case GeoJSONType.FEATURE:
            geometry = value.get('geometry')
            if geometry is None:
                raise MissingRequiredFieldError(geojson_type.value, 'geometry')
            _validate(geometry, level + 1, max_depth)
        case _:
            raise UnknownTypeError(type_name)


def validate_geojson(value: Any, max_depth: int | None = None) -> Any:
    """Validate ``value`` as any of the nine GeoJSON object types.

    Containers are validated member by member, depth-first and in array order.
    The first violation is raised as is, without wrapping. On success the input
    object itself is returned, untouched.
    """
    _validate(value, 0, Settings.MAX_NESTING_DEPTH if max_depth is None else max_depth)
    return value


def validate_geojson_of_type(value: Any, expected: GeoJSONType | str, max_depth: int | None = None) -> Any:
    geojson = validate_geojson(value, max_depth=max_depth)
    if geojson['type'] != expected:
        raise TypeMismatchError(str(expected), geojson['type'])
    return geojson


def try_validate_geojson(value: Any, max_depth: int | None = None) -> tuple[Any, GeoJSONValidationError | None]:
    try:
        return validate_geojson(value, max_depth=max_depth), None
    except GeoJSONValidationError as e:
        return None, e
