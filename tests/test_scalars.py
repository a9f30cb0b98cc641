import pytest
from geojson_scalars.core.exceptions import (
    GeoJSONValidationError,
    MalformedCoordinatesError,
    MissingRequiredFieldError,
    TypeMismatchError,
    UnclosedRingError,
    UnknownTypeError,
)
from geojson_scalars.enums import GeoJSONType
from geojson_scalars.scalars import (
    SCALARS,
    FeatureCollectionScalar,
    FeatureScalar,
    GeometryCollectionScalar,
    LineStringScalar,
    MultiLineStringScalar,
    MultiPointScalar,
    MultiPolygonScalar,
    PointScalar,
    PolygonScalar,
    create_geojson_scalar,
)
from graphql import Undefined, parse_value


def test_scalar_names_and_descriptions():
    for geojson_type, scalar in SCALARS.items():
        assert scalar.name == geojson_type.value
        assert scalar.description == f'A GeoJSON {geojson_type.value} object as defined by the GeoJSON format.'


def test_parse_valid_point(point):
    assert PointScalar.parse_value(point) == point


def test_parse_invalid_point():
    with pytest.raises(MalformedCoordinatesError, match=r'Point must have coordinates as \[x, y\] or \[x, y, z\]\.'):
        PointScalar.parse_value({'type': 'Point', 'coordinates': [125.6]})


def test_parse_valid_multi_point():
    multi_point = {'type': 'MultiPoint', 'coordinates': [[100.0, 0.0], [101.0, 1.0]]}

    assert MultiPointScalar.parse_value(multi_point) == multi_point


def test_parse_valid_line_string(line_string):
    assert LineStringScalar.parse_value(line_string) == line_string


def test_parse_valid_multi_line_string():
    multi_line_string = {
        'type': 'MultiLineString',
        'coordinates': [
            [[100.0, 0.0], [101.0, 1.0]],
            [[102.0, 2.0], [103.0, 3.0]],
        ],
    }

    assert MultiLineStringScalar.parse_value(multi_line_string) == multi_line_string


def test_parse_valid_polygon_with_hole(polygon):
    assert PolygonScalar.parse_value(polygon) == polygon


def test_parse_invalid_polygon():
    invalid_polygon = {'type': 'Polygon', 'coordinates': [[[100.0, 0.0], [101.0, 0.0]]]}

    with pytest.raises(UnclosedRingError, match='Each linear ring in a Polygon must have at least four positions and must be closed.'):
        PolygonScalar.parse_value(invalid_polygon)


def test_parse_valid_multi_polygon(multi_polygon):
    assert MultiPolygonScalar.parse_value(multi_polygon) == multi_polygon


def test_parse_invalid_multi_polygon():
    invalid_multi_polygon = {'type': 'MultiPolygon', 'coordinates': [[[[100.0, 0.0], [101.0, 0.0]]]]}

    with pytest.raises(UnclosedRingError):
        MultiPolygonScalar.parse_value(invalid_multi_polygon)


def test_parse_valid_geometry_collection(point, line_string):
    collection = {'type': 'GeometryCollection', 'geometries': [point, line_string]}

    assert GeometryCollectionScalar.parse_value(collection) == collection


def test_parse_valid_feature(feature):
    assert FeatureScalar.parse_value(feature) == feature


def test_parse_feature_missing_geometry():
    with pytest.raises(MissingRequiredFieldError, match="Feature must include a 'geometry' field."):
        FeatureScalar.parse_value({'type': 'Feature', 'properties': {}})


def test_parse_valid_feature_collection(feature_collection):
    assert FeatureCollectionScalar.parse_value(feature_collection) == feature_collection


def test_parse_feature_collection_missing_features():
    with pytest.raises(MissingRequiredFieldError, match="FeatureCollection must include a 'features' field."):
        FeatureCollectionScalar.parse_value({'type': 'FeatureCollection'})


def test_parse_invalid_type():
    with pytest.raises(UnknownTypeError, match='Invalid GeoJSON type: InvalidType.'):
        PointScalar.parse_value({'type': 'InvalidType'})


def test_parse_value_type_mismatch(point):
    with pytest.raises(TypeMismatchError, match="Expected GeoJSON type to be 'LineString', but got 'Point'."):
        LineStringScalar.parse_value(point)


def test_serialize_returns_input(polygon):
    assert PolygonScalar.serialize(polygon) is polygon


def test_serialize_type_mismatch(polygon):
    with pytest.raises(TypeMismatchError):
        FeatureScalar.serialize(polygon)


def test_parse_literal():
    node = parse_value('{type: "Polygon", coordinates: [[[0, 0], [1.5, 0], [1.5, 1.5], [0, 0]]]}')

    assert PolygonScalar.parse_literal(node) == {
        'type': 'Polygon',
        'coordinates': [[[0, 0], [1.5, 0], [1.5, 1.5], [0, 0]]],
    }


def test_parse_literal_nested_objects():
    node = parse_value(
        '{type: "Feature", geometry: {type: "Point", coordinates: [125.6, 10.1]}, properties: {name: "Dinagat"}}'
    )

    assert FeatureScalar.parse_literal(node) == {
        'type': 'Feature',
        'geometry': {'type': 'Point', 'coordinates': [125.6, 10.1]},
        'properties': {'name': 'Dinagat'},
    }


def test_parse_literal_defers_variables_until_execution():
    node = parse_value('{type: $type, coordinates: [[0, 0], [1, 1]]}')

    assert LineStringScalar.parse_literal(node) == {'type': Undefined, 'coordinates': [[0, 0], [1, 1]]}

    with pytest.raises(TypeMismatchError):
        LineStringScalar.parse_literal(node, {'type': 'Point'})


def test_parse_literal_rejects_non_object():
    with pytest.raises(ValueError, match='GeoJSON Point must be an object.'):
        PointScalar.parse_literal(parse_value('[125.6, 10.1]'))


def test_parse_literal_validates():
    node = parse_value('{type: "Point", coordinates: [[125.6, 10.1]]}')

    with pytest.raises(GeoJSONValidationError):
        PointScalar.parse_literal(node)


def test_create_scalar_for_any_type():
    scalar = create_geojson_scalar(GeoJSONType.POLYGON)

    assert scalar.name == 'Polygon'
    assert scalar is not PolygonScalar
