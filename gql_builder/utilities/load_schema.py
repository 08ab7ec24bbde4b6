from typing import Any, Mapping, Union

from graphql import GraphQLSchema, build_ast_schema, build_client_schema, parse


def load_schema(source: Union[GraphQLSchema, str, Mapping[str, Any]]) -> GraphQLSchema:
    """Build a GraphQLSchema from the provided source.

    :param source: either an already built GraphQLSchema,
        the schema in the GraphQL schema definition language,
        or the result of an introspection query (the :code:`"data"` key
        of the server answer is accepted too)

    :raises TypeError: if the source is none of the above
    :raises graphql.error.GraphQLError: if the SDL text cannot be parsed
    """

    if isinstance(source, GraphQLSchema):
        return source

    if isinstance(source, str):
        return build_ast_schema(parse(source))

    if isinstance(source, Mapping):
        introspection = source.get("data", source)
        if "__schema" not in introspection:
            raise TypeError("The introspection result has no '__schema' key.")
        return build_client_schema(introspection)  # type: ignore

    raise TypeError(f"Cannot load a schema from {type(source)}.")
