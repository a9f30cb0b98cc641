import pytest
from geojson_scalars.schemas import responses
from pydantic import TypeAdapter, ValidationError


geojson_adapter = TypeAdapter(responses.GeoJSON)


def test_polygon_model(polygon):
    model = geojson_adapter.validate_python(polygon)

    assert isinstance(model, responses.Polygon)
    assert model.model_dump() == polygon


def test_polygon_model_rejects_open_ring():
    with pytest.raises(ValidationError, match='Each linear ring in a Polygon must have at least four positions'):
        responses.Polygon.model_validate({'type': 'Polygon', 'coordinates': [[[0, 0], [1, 0], [1, 1], [2, 2]]]})


def test_multi_polygon_model_rejects_short_ring():
    with pytest.raises(ValidationError, match='Each linear ring'):
        geojson_adapter.validate_python({'type': 'MultiPolygon', 'coordinates': [[[[100, 0], [101, 0]]]]})


def test_point_model_rejects_wrong_depth():
    with pytest.raises(ValidationError, match=r'Point must have coordinates as \[x, y\] or \[x, y, z\]\.'):
        responses.Point.model_validate({'type': 'Point', 'coordinates': [[125.6, 10.1]]})


def test_point_model_rejects_numeric_strings():
    with pytest.raises(ValidationError):
        responses.Point.model_validate({'type': 'Point', 'coordinates': ['125.6', '10.1']})


def test_line_string_model_rejects_single_position():
    with pytest.raises(ValidationError, match='LineString'):
        responses.LineString.model_validate({'type': 'LineString', 'coordinates': [[0, 0]]})


def test_discriminator_picks_the_variant(feature_collection):
    model = geojson_adapter.validate_python(feature_collection)

    assert isinstance(model, responses.FeatureCollection)
    assert isinstance(model.features[0].geometry, responses.Point)
    assert isinstance(model.features[1].geometry, responses.Polygon)
    assert model.features[1].id == 7


def test_unknown_type_is_rejected():
    with pytest.raises(ValidationError):
        geojson_adapter.validate_python({'type': 'Circle', 'coordinates': [0, 0]})


def test_feature_requires_geometry():
    with pytest.raises(ValidationError):
        responses.Feature.model_validate({'type': 'Feature', 'properties': {}})


def test_geometry_collection_in_feature(point, line_string):
    feature = {
        'type': 'Feature',
        'geometry': {'type': 'GeometryCollection', 'geometries': [point, line_string]},
    }

    model = responses.Feature.model_validate(feature)

    assert isinstance(model.geometry, responses.GeometryCollection)
    assert isinstance(model.geometry.geometries[1], responses.LineString)


def test_foreign_members_pass_through(point):
    model = responses.Point.model_validate({**point, 'bbox': [100.0, 0.0, 100.0, 0.0], 'title': 'origin'})

    assert model.model_extra == {'bbox': [100.0, 0.0, 100.0, 0.0], 'title': 'origin'}
