from fastapi import APIRouter, Body
from geojson_scalars.enums import GeoJSONType
from geojson_scalars.graphql_schema import EXAMPLES
from geojson_scalars.schemas import responses
from geojson_scalars.validation import validate_geojson, validate_geojson_of_type
from typing import Annotated, Any


api_router = APIRouter(prefix='')


@api_router.post('/validate')
async def validate(geojson: Annotated[Any, Body()]) -> responses.ValidationResult:
    geojson = validate_geojson(geojson)
    return responses.ValidationResult(
        valid=True,
        type=geojson['type'],
        geojson=geojson,
    )


@api_router.post('/validate/{geojson_type}')
async def validate_of_type(geojson_type: GeoJSONType, geojson: Annotated[Any, Body()]) -> responses.ValidationResult:
    geojson = validate_geojson_of_type(geojson, geojson_type)
    return responses.ValidationResult(
        valid=True,
        type=geojson_type,
        geojson=geojson,
    )


@api_router.get('/examples/{geojson_type}', response_model_exclude_unset=True)
async def get_example(geojson_type: GeoJSONType) -> responses.GeoJSONDocument:
    return EXAMPLES[geojson_type]
