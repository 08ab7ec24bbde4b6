from enum import Enum
from math import isfinite
from typing import Any, Iterable, Mapping

from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    NullValueNode,
    StringValueNode,
    ValueNode,
    print_ast,
)
from graphql.pyutils import inspect


class EnumValue:
    """A bare symbolic argument value, rendered without quotes.

    :code:`add_field("images", {"sortKey": EnumValue("CREATED_AT")})`
    renders as :code:`images(sortKey: CREATED_AT)`.
    """

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, EnumValue) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


def ast_from_scalar_value(value: Any) -> ValueNode:
    """Given a python scalar, produce the AST of its GraphQL literal.

    Strings are printed by graphql-core later on, which takes care
    of the escaping of quotes and control characters."""

    if value is None:
        return NullValueNode()

    if isinstance(value, EnumValue):
        return EnumValueNode(value=value.name)

    if isinstance(value, Enum):
        return EnumValueNode(value=value.name)

    if isinstance(value, bool):
        return BooleanValueNode(value=value)

    if isinstance(value, int):
        return IntValueNode(value=f"{value:d}")

    if isinstance(value, float) and isfinite(value):
        return FloatValueNode(value=repr(value))

    if isinstance(value, str):
        return StringValueNode(value=value)

    raise TypeError(f"Cannot convert value to an argument literal: {inspect(value)}.")


def format_argument(value: Any) -> str:
    """Convert an argument value into its query language literal.

    - mappings are rendered as :code:`{ key: literal, key: literal }`
      keeping the insertion order,
    - other iterables (except str) are rendered as :code:`[literal, literal]`,
    - everything else is a scalar (see :func:`ast_from_scalar_value`).

    :raises TypeError: if a value cannot be converted
    """
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        fields = ", ".join(
            f"{key}: {format_argument(field_value)}"
            for key, field_value in value.items()
        )
        return f"{{ {fields} }}"

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return "[" + ", ".join(format_argument(item) for item in value) + "]"

    return print_ast(ast_from_scalar_value(value))


def copy_argument(value: Any) -> Any:
    """Copy an argument value, turning the iterables into lists
    so that the value can be rendered more than once."""
    if isinstance(value, Mapping):
        return {key: copy_argument(field_value) for key, field_value in value.items()}

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return [copy_argument(item) for item in value]

    return value


def format_arguments(arguments: Mapping[str, Any]) -> str:
    """Render the argument list of a field, without the parentheses."""
    return ", ".join(
        f"{name}: {format_argument(value)}" for name, value in arguments.items()
    )
