from enum import StrEnum


class ValidationErrorKind(StrEnum):
    UNKNOWN_TYPE = 'UnknownType'
    MISSING_REQUIRED_FIELD = 'MissingRequiredField'
    MALFORMED_COORDINATES = 'MalformedCoordinates'
    UNCLOSED_RING = 'UnclosedRing'
    TYPE_MISMATCH = 'TypeMismatch'
    NESTING_TOO_DEEP = 'NestingTooDeep'
