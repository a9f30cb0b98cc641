from collections.abc import Sequence
from geojson_scalars.core.constants import (
    INVALID_TYPE_MESSAGE,
    MISSING_ARRAY_FIELD_MESSAGE,
    MISSING_FIELD_MESSAGE,
    NESTING_TOO_DEEP_MESSAGE,
    NOT_AN_OBJECT_MESSAGE,
    TYPE_MISMATCH_MESSAGE,
)
from geojson_scalars.enums import ALLOWED_TYPE_NAMES, ValidationErrorKind
from typing import Any


class GeoJSONValidationError(ValueError):
    """A GeoJSON value was rejected.

    The message is rendered once from ``message_template`` and ``ctx`` so that
    nested failures can be re-raised untouched by the outer validation calls.
    """

    kind: ValidationErrorKind

    def __init__(self, message_template: str, **ctx: Any) -> None:
        self.message_template = message_template
        self.ctx = ctx
        self.message = message_template.format(**ctx)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, str]:
        return {
            'kind': self.kind.value,
            'message': self.message,
        }


class UnknownTypeError(GeoJSONValidationError):
    kind = ValidationErrorKind.UNKNOWN_TYPE

    def __init__(
        self,
        type_name: Any,
        allowed: Sequence[str] = ALLOWED_TYPE_NAMES,
        message_template: str = INVALID_TYPE_MESSAGE,
    ) -> None:
        self.type_name = type_name
        self.allowed = tuple(allowed)
        super().__init__(message_template, type_name=type_name, allowed=', '.join(self.allowed))

    @classmethod
    def not_an_object(cls) -> 'UnknownTypeError':
        return cls(None, message_template=NOT_AN_OBJECT_MESSAGE)


class MissingRequiredFieldError(GeoJSONValidationError):
    kind = ValidationErrorKind.MISSING_REQUIRED_FIELD

    def __init__(self, type_name: str, field_name: str, expect_array: bool = False) -> None:
        self.type_name = type_name
        self.field_name = field_name
        template = MISSING_ARRAY_FIELD_MESSAGE if expect_array else MISSING_FIELD_MESSAGE
        super().__init__(template, type_name=type_name, field_name=field_name)


class MalformedCoordinatesError(GeoJSONValidationError):
    kind = ValidationErrorKind.MALFORMED_COORDINATES


class UnclosedRingError(GeoJSONValidationError):
    kind = ValidationErrorKind.UNCLOSED_RING


class TypeMismatchError(GeoJSONValidationError):
    kind = ValidationErrorKind.TYPE_MISMATCH

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(TYPE_MISMATCH_MESSAGE, expected=expected, actual=actual)


class NestingTooDeepError(GeoJSONValidationError):
    kind = ValidationErrorKind.NESTING_TOO_DEEP

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(NESTING_TOO_DEEP_MESSAGE, max_depth=max_depth)
