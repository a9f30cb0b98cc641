from geojson_scalars.enums import GeoJSONType
from typing import Any


EXAMPLES: dict[GeoJSONType, dict[str, Any]] = {
    GeoJSONType.POINT: {
        'type': GeoJSONType.POINT.value,
        'coordinates': [125.6, 10.1],
    },
    GeoJSONType.LINE_STRING: {
        'type': GeoJSONType.LINE_STRING.value,
        'coordinates': [[125.6, 10.1], [126.0, 10.2]],
    },
    GeoJSONType.POLYGON: {
        'type': GeoJSONType.POLYGON.value,
        'coordinates': [
            [[125.6, 10.1], [126.0, 10.2], [127.0, 11.0], [125.6, 10.1]],
        ],
    },
    GeoJSONType.MULTI_POINT: {
        'type': GeoJSONType.MULTI_POINT.value,
        'coordinates': [[125.6, 10.1], [126.0, 10.2]],
    },
    GeoJSONType.MULTI_LINE_STRING: {
        'type': GeoJSONType.MULTI_LINE_STRING.value,
        'coordinates': [
            [[125.6, 10.1], [126.0, 10.2]],
            [[127.0, 11.0], [128.0, 12.0]],
        ],
    },
    GeoJSONType.MULTI_POLYGON: {
        'type': GeoJSONType.MULTI_POLYGON.value,
        'coordinates': [
            [
                [[125.6, 10.1], [126.0, 10.2], [127.0, 11.0], [125.6, 10.1]],
            ],
        ],
    },
    GeoJSONType.GEOMETRY_COLLECTION: {
        'type': GeoJSONType.GEOMETRY_COLLECTION.value,
        'geometries': [
            {'type': GeoJSONType.POINT.value, 'coordinates': [125.6, 10.1]},
            {'type': GeoJSONType.LINE_STRING.value, 'coordinates': [[125.6, 10.1], [126.0, 10.2]]},
        ],
    },
    GeoJSONType.FEATURE: {
        'type': GeoJSONType.FEATURE.value,
        'geometry': {'type': GeoJSONType.POINT.value, 'coordinates': [125.6, 10.1]},
    },
    GeoJSONType.FEATURE_COLLECTION: {
        'type': GeoJSONType.FEATURE_COLLECTION.value,
        'features': [
            {
                'type': GeoJSONType.FEATURE.value,
                'geometry': {'type': GeoJSONType.POINT.value, 'coordinates': [125.6, 10.1]},
            },
        ],
    },
}


def _query_field_name(geojson_type: GeoJSONType) -> str:
    return f'example{geojson_type.value}'


EXAMPLE_TYPE_DEFS = 'type Query {\n' + ''.join(
    f'  {_query_field_name(geojson_type)}: {geojson_type.value}\n' for geojson_type in GeoJSONType
) + '}\n'


def _example_resolver(geojson_type: GeoJSONType):
    def resolve(obj: Any, info: Any) -> dict[str, Any]:
        return EXAMPLES[geojson_type]
    return resolve


EXAMPLE_RESOLVERS = {
    'Query': {
        _query_field_name(geojson_type): _example_resolver(geojson_type) for geojson_type in GeoJSONType
    },
}
