import sys

from geojson_scalars.core.settings import Settings
from loguru import logger


def init_logging(level: str | None = None) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or Settings.LOG_LEVEL,
        format='<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {name}:{line} - {message}',
    )
