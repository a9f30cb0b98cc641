from geojson_scalars.graphql_schema import EXAMPLE_RESOLVERS, EXAMPLE_TYPE_DEFS, RESOLVERS, TYPE_DEFS, make_executable_schema


schema = make_executable_schema(
    [TYPE_DEFS, EXAMPLE_TYPE_DEFS],
    {**RESOLVERS, **EXAMPLE_RESOLVERS},
)
