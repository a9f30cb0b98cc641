from geojson_scalars.scalars import SCALARS
from graphql import GraphQLScalarType


RESOLVERS: dict[str, GraphQLScalarType] = {
    geojson_type.value: scalar for geojson_type, scalar in SCALARS.items()
}
