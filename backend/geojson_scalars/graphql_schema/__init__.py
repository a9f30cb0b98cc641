from geojson_scalars.graphql_schema.examples import EXAMPLE_RESOLVERS, EXAMPLE_TYPE_DEFS, EXAMPLES
from geojson_scalars.graphql_schema.executable import make_executable_schema
from geojson_scalars.graphql_schema.resolvers import RESOLVERS
from geojson_scalars.graphql_schema.type_defs import TYPE_DEFS
