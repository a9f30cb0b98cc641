from geojson_scalars.enums.geojson_type import ALLOWED_TYPE_NAMES, GeoJSONType
from geojson_scalars.enums.validation_error_kind import ValidationErrorKind
