import json

from fastapi import APIRouter, Depends, HTTPException, Query, status
from geojson_scalars.core.deps import get_schema
from geojson_scalars.schemas import requests, responses
from graphql import GraphQLSchema, graphql
from loguru import logger
from typing import Annotated, Any


api_router = APIRouter(prefix='')


async def _execute(schema: GraphQLSchema, query: str, variables: dict[str, Any] | None, operation_name: str | None) -> responses.GraphQLResponse:
    result = await graphql(
        schema,
        query,
        variable_values=variables,
        operation_name=operation_name,
    )
    if result.errors:
        for error in result.errors:
            logger.info(f'GraphQL error: {error.message}')
        return responses.GraphQLResponse(
            data=result.data,
            errors=[error.formatted for error in result.errors],
        )
    return responses.GraphQLResponse(data=result.data)


@api_router.post('', response_model_exclude_none=True)
async def execute_post(request: requests.GraphQLRequest, schema: GraphQLSchema = Depends(get_schema)) -> responses.GraphQLResponse:
    return await _execute(schema, request.query, request.variables, request.operation_name)


@api_router.get('', response_model_exclude_none=True)
async def execute_get(
    query: str,
    variables: str | None = None,
    operation_name: Annotated[str | None, Query(alias='operationName')] = None,
    schema: GraphQLSchema = Depends(get_schema),
) -> responses.GraphQLResponse:
    try:
        parsed_variables = json.loads(variables) if variables else None
    except json.JSONDecodeError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Variables are invalid JSON.')
    if parsed_variables is not None and not isinstance(parsed_variables, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Variables must be a JSON object.')
    return await _execute(schema, query, parsed_variables, operation_name)
