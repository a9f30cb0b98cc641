from geojson_scalars.core.constants import LITERAL_NOT_AN_OBJECT_MESSAGE
from geojson_scalars.enums import GeoJSONType
from geojson_scalars.validation import validate_geojson_of_type
from graphql import GraphQLScalarType, ListValueNode, ObjectValueNode, ValueNode, VariableNode
from graphql.utilities import value_from_ast_untyped
from typing import Any


def _contains_variable(node: ValueNode) -> bool:
    if isinstance(node, VariableNode):
        return True
    if isinstance(node, ObjectValueNode):
        return any(_contains_variable(field.value) for field in node.fields)
    if isinstance(node, ListValueNode):
        return any(_contains_variable(item) for item in node.values)
    return False


def create_geojson_scalar(expected_type: GeoJSONType) -> GraphQLScalarType:
    """Build a GraphQL scalar that only accepts GeoJSON objects of ``expected_type``."""

    def serialize(value: Any) -> Any:
        return validate_geojson_of_type(value, expected_type)

    def parse_value(value: Any) -> Any:
        return validate_geojson_of_type(value, expected_type)

    def parse_literal(ast: ValueNode, variables: dict[str, Any] | None = None) -> Any:
        if not isinstance(ast, ObjectValueNode):
            raise ValueError(LITERAL_NOT_AN_OBJECT_MESSAGE.format(type_name=expected_type.value))
        value = value_from_ast_untyped(ast, variables)
        # document validation parses literals without variables; the execution pass checks them
        if variables is None and _contains_variable(ast):
            return value
        return validate_geojson_of_type(value, expected_type)

    return GraphQLScalarType(
        name=expected_type.value,
        description=f'A GeoJSON {expected_type.value} object as defined by the GeoJSON format.',
        serialize=serialize,
        parse_value=parse_value,
        parse_literal=parse_literal,
    )


PointScalar = create_geojson_scalar(GeoJSONType.POINT)
LineStringScalar = create_geojson_scalar(GeoJSONType.LINE_STRING)
PolygonScalar = create_geojson_scalar(GeoJSONType.POLYGON)
MultiPointScalar = create_geojson_scalar(GeoJSONType.MULTI_POINT)
MultiLineStringScalar = create_geojson_scalar(GeoJSONType.MULTI_LINE_STRING)
MultiPolygonScalar = create_geojson_scalar(GeoJSONType.MULTI_POLYGON)
GeometryCollectionScalar = create_geojson_scalar(GeoJSONType.GEOMETRY_COLLECTION)
FeatureScalar = create_geojson_scalar(GeoJSONType.FEATURE)
FeatureCollectionScalar = create_geojson_scalar(GeoJSONType.FEATURE_COLLECTION)

SCALARS: dict[GeoJSONType, GraphQLScalarType] = {
    GeoJSONType.POINT: PointScalar,
    GeoJSONType.LINE_STRING: LineStringScalar,
    GeoJSONType.POLYGON: PolygonScalar,
    GeoJSONType.MULTI_POINT: MultiPointScalar,
    GeoJSONType.MULTI_LINE_STRING: MultiLineStringScalar,
    GeoJSONType.MULTI_POLYGON: MultiPolygonScalar,
    GeoJSONType.GEOMETRY_COLLECTION: GeometryCollectionScalar,
    GeoJSONType.FEATURE: FeatureScalar,
    GeoJSONType.FEATURE_COLLECTION: FeatureCollectionScalar,
}
