from geojson_scalars.scalars.geojson import (
    SCALARS,
    FeatureCollectionScalar,
    FeatureScalar,
    GeometryCollectionScalar,
    LineStringScalar,
    MultiLineStringScalar,
    MultiPointScalar,
    MultiPolygonScalar,
    PointScalar,
    PolygonScalar,
    create_geojson_scalar,
)
