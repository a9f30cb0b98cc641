from geojson_scalars.schemas.responses.geojson import (
    Feature,
    FeatureCollection,
    GeoJSON,
    GeoJSONDocument,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_scalars.schemas.responses.graphql_response import GraphQLResponse
from geojson_scalars.schemas.responses.validation import ErrorDetail, ValidationResult
