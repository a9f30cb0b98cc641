from collections.abc import Callable
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from geojson_scalars.core.exceptions import GeoJSONValidationError
from geojson_scalars.schemas import responses
from loguru import logger
from typing import Any


async def geojson_validation_exception_handler(request: Request, exc: GeoJSONValidationError) -> JSONResponse:
    logger.info(f'Rejected GeoJSON on {request.url.path}: [{exc.kind}] {exc}')
    result = responses.ValidationResult(
        valid=False,
        error=responses.ErrorDetail(**exc.to_dict()),
    )
    return JSONResponse(
        status_code=422,
        content=result.model_dump(mode='json', exclude_none=True),
    )


roster: list[tuple[type[Exception], Callable[..., Any]]] = [
    (GeoJSONValidationError, geojson_validation_exception_handler),
]


def setup_exception_handlers(
    main_app: FastAPI,
    custom_roster: list[tuple[type[Exception], Callable[..., Any]]] | None = None,
) -> None:
    custom_roster = custom_roster or []
    for exc, handler in roster + custom_roster:
        main_app.add_exception_handler(exc, handler)
