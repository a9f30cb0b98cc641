from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from geojson_scalars.core.exception_handlers import setup_exception_handlers
from geojson_scalars.core.logging import init_logging
from geojson_scalars.core.settings import Settings
from geojson_scalars.routers import (
    geojson as geojson_router,
    graphql as graphql_router,
)
from loguru import logger


init_logging()


async def lifespan(app: FastAPI):
    logger.info(f'GraphQL server is running at http://{Settings.HOST}:{Settings.PORT}{Settings.GRAPHQL_PATH}')
    yield
    logger.info('GraphQL server stopped')


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"], # Allows all methods
    allow_headers=["*"], # Allows all headers
)

app.include_router(graphql_router.api_router, prefix=Settings.GRAPHQL_PATH, tags=['graphql'])
app.include_router(geojson_router.api_router, prefix='/geojson', tags=['geojson'])

setup_exception_handlers(app)


def run() -> None:
    import uvicorn

    uvicorn.run('geojson_scalars.main:app', host=Settings.HOST, port=Settings.PORT)


if __name__ == '__main__':
    run()
