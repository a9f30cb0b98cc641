"""GraphQL scalars and a structural validator for RFC 7946 GeoJSON objects."""
from geojson_scalars.core.exceptions import (
    GeoJSONValidationError,
    MalformedCoordinatesError,
    MissingRequiredFieldError,
    NestingTooDeepError,
    TypeMismatchError,
    UnclosedRingError,
    UnknownTypeError,
)
from geojson_scalars.enums import GeoJSONType, ValidationErrorKind
from geojson_scalars.graphql_schema import RESOLVERS, TYPE_DEFS, make_executable_schema
from geojson_scalars.scalars import (
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
from geojson_scalars.validation import (
    check_coordinates,
    try_validate_geojson,
    validate_geojson,
    validate_geojson_of_type,
)

__version__ = '1.0.0'
