import os

from dotenv import load_dotenv
from geojson_scalars.core.constants import DEFAULT_MAX_NESTING_DEPTH


load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


class Settings:
    MAX_NESTING_DEPTH: int = int(os.getenv('GEOJSON_MAX_NESTING_DEPTH', DEFAULT_MAX_NESTING_DEPTH))

    LOG_LEVEL: str = os.getenv('GEOJSON_LOG_LEVEL', 'INFO').upper()

    HOST: str = os.getenv('GEOJSON_HOST', '127.0.0.1')
    PORT: int = int(os.getenv('GEOJSON_PORT', 8000))
    GRAPHQL_PATH: str = os.getenv('GEOJSON_GRAPHQL_PATH', '/graphql')

    CORS_ORIGINS: list[str] = _split_csv(os.getenv(
        'GEOJSON_CORS_ORIGINS',
        'http://localhost:5173,https://localhost:5173,http://localhost:3000,https://localhost:3000',
    ))
