from typing import Optional

from graphql import (
    GraphQLNamedType,
    GraphQLSchema,
    OperationType,
    get_named_type,
    is_composite_type,
    is_interface_type,
    is_object_type,
)


def get_root_type(
    schema: GraphQLSchema, operation_type: OperationType
) -> Optional[GraphQLNamedType]:
    """Return the root type of an operation, if the schema defines one."""
    return {
        OperationType.QUERY: schema.query_type,
        OperationType.MUTATION: schema.mutation_type,
        OperationType.SUBSCRIPTION: schema.subscription_type,
    }[operation_type]


def get_field_type(
    parent_type: Optional[GraphQLNamedType], field_name: str
) -> Optional[GraphQLNamedType]:
    """Return the unwrapped output type of a field of a composite type.

    Field names are not validated: None is returned if the parent type
    is unknown, has no fields, or has no field with this name.
    """
    if not (is_object_type(parent_type) or is_interface_type(parent_type)):
        return None

    field = parent_type.fields.get(field_name)  # type: ignore

    if field is None:
        return None

    return get_named_type(field.type)


def has_field(type_: Optional[GraphQLNamedType], field_name: str) -> bool:
    return get_field_type(type_, field_name) is not None


def is_fragment_target(type_: Optional[GraphQLNamedType]) -> bool:
    """Fragments can only be defined on object, interface and union types."""
    return type_ is not None and is_composite_type(type_)


def get_fragment_target(
    schema: GraphQLSchema, type_name: str
) -> Optional[GraphQLNamedType]:
    """Return the named type if a fragment can be defined on it."""
    type_ = schema.get_type(type_name)
    return type_ if is_fragment_target(type_) else None
