DEFAULT_MAX_NESTING_DEPTH = 32

POSITION_MIN_LENGTH = 2
LINEAR_RING_MIN_POSITIONS = 4

NOT_AN_OBJECT_MESSAGE = 'GeoJSON must be an object.'
INVALID_TYPE_MESSAGE = 'Invalid GeoJSON type: {type_name}. Allowed types are {allowed}.'
MISSING_FIELD_MESSAGE = "{type_name} must include a '{field_name}' field."
MISSING_ARRAY_FIELD_MESSAGE = "{type_name} must include a '{field_name}' field with an array."
TYPE_MISMATCH_MESSAGE = "Expected GeoJSON type to be '{expected}', but got '{actual}'."
NESTING_TOO_DEEP_MESSAGE = 'GeoJSON nesting exceeds the maximum depth of {max_depth}.'
LITERAL_NOT_AN_OBJECT_MESSAGE = 'GeoJSON {type_name} must be an object.'
