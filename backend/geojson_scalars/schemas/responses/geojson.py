from geojson_scalars.enums import GeoJSONType
from geojson_scalars.validation import GEOMETRY_RULES, RING_RULE, iter_rings
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, RootModel
from typing import Annotated, Any, Literal, Union


POSITION_TYPE = list[float]


def _coordinates_rule(geojson_type: GeoJSONType):
    rule = GEOMETRY_RULES[geojson_type]

    def check(value: Any) -> Any:
        if not rule.shape.check(value):
            raise ValueError(rule.shape.message)
        if rule.ring_level is not None:
            for ring in iter_rings(value, rule.ring_level):
                if not RING_RULE.check(ring):
                    raise ValueError(RING_RULE.message)
        return value

    return BeforeValidator(check)


class _GeoJSONModel(BaseModel):
    # bbox, crs and foreign members are carried through unvalidated
    model_config = ConfigDict(extra='allow')


# ----- Geometry Types -----
class Point(_GeoJSONModel):
    type: Literal['Point']
    coordinates: Annotated[POSITION_TYPE, _coordinates_rule(GeoJSONType.POINT)]

class MultiPoint(_GeoJSONModel):
    type: Literal['MultiPoint']
    coordinates: Annotated[list[POSITION_TYPE], _coordinates_rule(GeoJSONType.MULTI_POINT)]

class LineString(_GeoJSONModel):
    type: Literal['LineString']
    coordinates: Annotated[list[POSITION_TYPE], _coordinates_rule(GeoJSONType.LINE_STRING)]

class MultiLineString(_GeoJSONModel):
    type: Literal['MultiLineString']
    coordinates: Annotated[list[list[POSITION_TYPE]], _coordinates_rule(GeoJSONType.MULTI_LINE_STRING)]

class Polygon(_GeoJSONModel):
    type: Literal['Polygon']
    coordinates: Annotated[list[list[POSITION_TYPE]], _coordinates_rule(GeoJSONType.POLYGON)]

class MultiPolygon(_GeoJSONModel):
    type: Literal['MultiPolygon']
    coordinates: Annotated[list[list[list[POSITION_TYPE]]], _coordinates_rule(GeoJSONType.MULTI_POLYGON)]

class GeometryCollection(_GeoJSONModel):
    type: Literal['GeometryCollection']
    geometries: list['Geometry']

Geometry = Annotated[
    Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection],
    Field(discriminator='type'),
]

# ----- Core GeoJSON Objects -----
class Feature(_GeoJSONModel):
    type: Literal['Feature']
    geometry: Geometry
    properties: dict[str, Any] | None = Field(default=None)
    id: str | int | None = None

class FeatureCollection(_GeoJSONModel):
    type: Literal['FeatureCollection']
    features: list[Feature]

GeoJSON = Annotated[
    Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection, Feature, FeatureCollection],
    Field(discriminator='type'),
]

GeometryCollection.model_rebuild()
Feature.model_rebuild()
FeatureCollection.model_rebuild()


class GeoJSONDocument(RootModel[GeoJSON]):
    pass
