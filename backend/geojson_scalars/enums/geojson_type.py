from enum import StrEnum
from typing import Any


class GeoJSONType(StrEnum):
    POINT = 'Point'
    LINE_STRING = 'LineString'
    POLYGON = 'Polygon'
    MULTI_POINT = 'MultiPoint'
    MULTI_LINE_STRING = 'MultiLineString'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'
    FEATURE = 'Feature'
    FEATURE_COLLECTION = 'FeatureCollection'

    @classmethod
    def lookup(cls, value: Any) -> 'GeoJSONType | None':
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


ALLOWED_TYPE_NAMES: tuple[str, ...] = tuple(member.value for member in GeoJSONType)
