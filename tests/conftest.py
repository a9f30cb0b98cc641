import pytest
import pytest_asyncio
from geojson_scalars.main import app
from httpx import ASGITransport, AsyncClient

BASE_URL = 'http://testserver'


@pytest_asyncio.fixture
async def client() -> AsyncClient:
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as client:
        yield client


@pytest.fixture
def point() -> dict:
    return {
        'type': 'Point',
        'coordinates': [100.0, 0.0],
    }


@pytest.fixture
def line_string() -> dict:
    return {
        'type': 'LineString',
        'coordinates': [[100.0, 0.0], [101.0, 1.0]],
    }


@pytest.fixture
def polygon() -> dict:
    """Polygon with one hole."""
    return {
        'type': 'Polygon',
        'coordinates': [
            [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]],
            [[100.8, 0.8], [100.8, 0.2], [100.2, 0.2], [100.2, 0.8], [100.8, 0.8]],
        ],
    }


@pytest.fixture
def multi_polygon() -> dict:
    return {
        'type': 'MultiPolygon',
        'coordinates': [
            [
                [[102.0, 2.0], [103.0, 2.0], [103.0, 3.0], [102.0, 3.0], [102.0, 2.0]],
            ],
            [
                [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]],
                [[100.2, 0.2], [100.2, 0.8], [100.8, 0.8], [100.8, 0.2], [100.2, 0.2]],
            ],
        ],
    }


@pytest.fixture
def feature(point) -> dict:
    return {
        'type': 'Feature',
        'geometry': point,
        'properties': {'name': 'Dinagat Islands'},
    }


@pytest.fixture
def feature_collection(feature, polygon) -> dict:
    return {
        'type': 'FeatureCollection',
        'features': [
            feature,
            {'type': 'Feature', 'geometry': polygon, 'properties': None, 'id': 7},
        ],
    }
