from collections.abc import Callable, Iterable, Mapping
from graphql import GraphQLObjectType, GraphQLScalarType, GraphQLSchema, build_schema
from typing import Any


def _bind_scalar(schema: GraphQLSchema, name: str, scalar: GraphQLScalarType) -> None:
    graphql_type = schema.type_map.get(name)
    if not isinstance(graphql_type, GraphQLScalarType):
        raise ValueError(f'Scalar {name} is not declared in the type definitions.')
    graphql_type.description = scalar.description
    graphql_type.serialize = scalar.serialize
    graphql_type.parse_value = scalar.parse_value
    graphql_type.parse_literal = scalar.parse_literal


def _bind_fields(schema: GraphQLSchema, name: str, field_resolvers: Mapping[str, Callable[..., Any]]) -> None:
    graphql_type = schema.type_map.get(name)
    if not isinstance(graphql_type, GraphQLObjectType):
        raise ValueError(f'Object type {name} is not declared in the type definitions.')
    for field_name, resolve in field_resolvers.items():
        if field_name not in graphql_type.fields:
            raise ValueError(f'Field {name}.{field_name} is not declared in the type definitions.')
        graphql_type.fields[field_name].resolve = resolve


def make_executable_schema(
    type_defs: str | Iterable[str],
    resolvers: Mapping[str, GraphQLScalarType | Mapping[str, Callable[..., Any]]],
) -> GraphQLSchema:
    """Build a schema from SDL and attach scalar implementations and field resolvers.

    ``resolvers`` maps a type name either to a ``GraphQLScalarType`` whose
    serialize/parse functions replace the SDL scalar's defaults, or to a
    mapping of field name to resolver for an object type.
    """
    if not isinstance(type_defs, str):
        type_defs = '\n'.join(type_defs)
    schema = build_schema(type_defs)

    for name, resolver in resolvers.items():
        if isinstance(resolver, GraphQLScalarType):
            _bind_scalar(schema, name, resolver)
        else:
            _bind_fields(schema, name, resolver)

    return schema
