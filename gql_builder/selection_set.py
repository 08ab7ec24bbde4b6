import logging
from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Optional,
    TypeVar,
    Union,
)

from graphql import GraphQLNamedType

from .arguments import copy_argument, format_arguments
from .exceptions import InvalidInlineFragmentTarget
from .utilities import get_field_type, has_field

if TYPE_CHECKING:
    from .document import Document, Fragment  # pragma: no cover

log = logging.getLogger(__name__)

INDENT = "  "

Selection = Union["Field", "FragmentSpread", "InlineFragment"]
S = TypeVar("S")
Builder = Optional[Callable[[S], Any]]


class SelectionSet:
    """An ordered list of fields, fragment spreads and inline fragments.

    Selections are rendered in insertion order, fields with
    the same name are kept as they are.
    """

    def __init__(self):
        self.selections: List[Selection] = []

    def add(self, selection: Selection) -> Selection:
        self.selections.append(selection)
        return selection

    def to_query(self, indent: str = "") -> str:
        """Render each selection on its own line(s), prefixed with indent."""
        return "\n".join(
            selection.to_query(indent=indent) for selection in self.selections
        )

    def __iter__(self) -> Iterator[Selection]:
        return iter(self.selections)

    def __len__(self) -> int:
        return len(self.selections)

    def __bool__(self) -> bool:
        return bool(self.selections)


class HasSelectionSet(ABC):
    """HasSelectionSet defines the methods used to add children
    selections to a node owning a :class:`SelectionSet`.

    Inherited by
    :class:`Field <gql_builder.selection_set.Field>`,
    :class:`InlineFragment <gql_builder.selection_set.InlineFragment>`,
    :class:`Fragment <gql_builder.document.Fragment>` and
    :class:`Operation <gql_builder.document.Operation>`
    """

    document: "Document"
    selection_set: SelectionSet

    @property
    @abstractmethod
    def resolver_type(self) -> Optional[GraphQLNamedType]:
        """The schema type on which the children selections are made,
        or None if it cannot be found in the schema."""
        raise NotImplementedError(
            "Any HasSelectionSet subclass must have a resolver_type property"
        )  # pragma: no cover

    @property
    def selections(self) -> List[Selection]:
        return self.selection_set.selections

    def add_field(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]] = None,
        builder: Builder["Field"] = None,
        *,
        alias: Optional[str] = None,
    ) -> "Field":
        """Select a new child field.

        :param name: the name of the field
        :param arguments: the field arguments, rendered in the provided order
        :param builder: callable receiving the new field, used to select
            its own children
        :param alias: an optional alias for the field
        :return: the new :class:`Field`
        """
        field = Field(
            name,
            arguments,
            parent_type=self.resolver_type,
            document=self.document,
            alias=alias,
        )

        if builder is not None:
            builder(field)

        self.selection_set.add(field)

        return field

    def add_fragment(self, fragment: Union[str, "Fragment"]) -> "FragmentSpread":
        """Spread a named fragment.

        The fragment does not have to be defined yet in the document.

        :param fragment: the fragment name or the fragment itself
        :return: the new :class:`FragmentSpread`
        """
        name = fragment if isinstance(fragment, str) else fragment.name
        spread = FragmentSpread(name)

        self.selection_set.add(spread)

        return spread

    def add_inline_fragment(
        self,
        type_name: Optional[str] = None,
        builder: Builder["InlineFragment"] = None,
    ) -> "InlineFragment":
        """Select fields on a specific type with an inline fragment.

        :param type_name: the type condition. By default, the type on which
            the selections of this node are made.
        :param builder: callable receiving the new inline fragment
        :return: the new :class:`InlineFragment`

        :raises InvalidInlineFragmentTarget: if no type name is provided and
            the type of this node is not known by the schema
        """
        type_: Union[str, Optional[GraphQLNamedType]]

        if type_name is None:
            type_ = self.resolver_type
            if type_ is None:
                raise InvalidInlineFragmentTarget(
                    f"Cannot find the type of {self!r}. "
                    "Please provide the type of the inline fragment."
                )
        else:
            type_ = type_name

        inline_fragment = InlineFragment(type_, document=self.document)

        if builder is not None:
            builder(inline_fragment)

        self.selection_set.add(inline_fragment)

        return inline_fragment

    def add_connection(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]] = None,
        builder: Builder["Field"] = None,
        *,
        alias: Optional[str] = None,
    ) -> "Field":
        """Select a Relay connection field with its edges, cursors and page info.

        The ``id`` field of this node is selected first if its type has one
        and it is not selected yet.

        :param builder: callable receiving the ``node`` field of the edges
        :return: the connection :class:`Field`
        """
        if has_field(self.resolver_type, "id") and not self._has_selected_field("id"):
            self.add_field("id")

        def build_edges(edges: Field) -> None:
            edges.add_field("cursor")
            edges.add_field("node", builder=builder)

        def build_connection(connection: Field) -> None:
            connection.add_field("edges", builder=build_edges)
            connection.add_field("pageInfo", builder=build_page_info)

        return self.add_field(name, arguments, build_connection, alias=alias)

    def _has_selected_field(self, name: str) -> bool:
        return any(
            isinstance(selection, Field) and selection.name == name
            for selection in self.selection_set
        )


def build_page_info(page_info: "Field") -> None:
    page_info.add_field("hasPreviousPage")
    page_info.add_field("hasNextPage")


class Field(HasSelectionSet):
    """A named field, with optional arguments and children selections.

    Instances of this class are created by the
    :meth:`add_field <gql_builder.selection_set.HasSelectionSet.add_field>`
    method.
    """

    def __init__(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]] = None,
        *,
        parent_type: Optional[GraphQLNamedType],
        document: "Document",
        alias: Optional[str] = None,
    ):
        self.name = name
        self.alias = alias
        self.arguments: Dict[str, Any] = {
            key: copy_argument(value) for key, value in (arguments or {}).items()
        }
        self.document = document
        self.selection_set = SelectionSet()
        self._type = get_field_type(parent_type, name)
        log.debug(f"Creating {self!r}")

    @property
    def resolver_type(self) -> Optional[GraphQLNamedType]:
        return self._type

    def to_query(self, indent: str = "") -> str:
        query = indent
        if self.alias:
            query += f"{self.alias}: "
        query += self.name

        if self.arguments:
            query += f"({format_arguments(self.arguments)})"

        if self.selection_set:
            query += " {\n"
            query += self.selection_set.to_query(indent + INDENT)
            query += f"\n{indent}}}"

        return query

    __str__ = to_query

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class FragmentSpread:
    """A reference to a named fragment, rendered as ``...name``.

    Only the name is kept, the fragment is looked up
    by the document when rendering the fragment definitions.
    """

    def __init__(self, name: str):
        self.name = name
        log.debug(f"Creating {self!r}")

    def to_query(self, indent: str = "") -> str:
        return f"{indent}...{self.name}"

    __str__ = to_query

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class InlineFragment(HasSelectionSet):
    """Selections made on a specific type, rendered as ``... on Type { }``.

    The type condition is not validated against the schema.
    """

    def __init__(self, type_: Union[str, GraphQLNamedType], *, document: "Document"):
        self.document = document
        self.selection_set = SelectionSet()

        if isinstance(type_, str):
            self.type_name = type_
            self._type = document.schema.get_type(type_)
        else:
            self.type_name = type_.name
            self._type = type_

        log.debug(f"Creating {self!r}")

    @property
    def type(self) -> Optional[GraphQLNamedType]:
        return self._type

    @property
    def resolver_type(self) -> Optional[GraphQLNamedType]:
        return self._type

    def to_query(self, indent: str = "") -> str:
        return (
            f"{indent}... on {self.type_name} {{\n"
            f"{self.selection_set.to_query(indent + INDENT)}\n"
            f"{indent}}}"
        )

    __str__ = to_query

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} on {self.type_name}>"
