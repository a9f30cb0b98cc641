from geojson_scalars.validation.coordinates import (
    GEOMETRY_RULES,
    RING_RULE,
    CoordinateRule,
    GeometryRule,
    check_coordinates,
    iter_rings,
)
from geojson_scalars.validation.structure import (
    try_validate_geojson,
    validate_geojson,
    validate_geojson_of_type,
)
