from geojson_scalars.enums import GeoJSONType, ValidationErrorKind
from pydantic import BaseModel
from typing import Any


class ErrorDetail(BaseModel):
    kind: ValidationErrorKind
    message: str


class ValidationResult(BaseModel):
    valid: bool
    type: GeoJSONType | None = None
    geojson: Any = None
    error: ErrorDetail | None = None
