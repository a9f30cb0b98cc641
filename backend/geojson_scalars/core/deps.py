from geojson_scalars.core.executable_schema import schema
from graphql import GraphQLSchema


def get_schema() -> GraphQLSchema:
    return schema
