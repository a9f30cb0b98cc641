from geojson_scalars.schemas.requests.graphql_request import GraphQLRequest
