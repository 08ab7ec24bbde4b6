import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from graphql import GraphQLNamedType, GraphQLSchema, OperationType

from .exceptions import (
    DuplicateFragmentName,
    DuplicateOperationName,
    InvalidDocument,
    InvalidFragmentTarget,
)
from .selection_set import INDENT, HasSelectionSet, SelectionSet
from .utilities import get_fragment_target, get_root_type

log = logging.getLogger(__name__)

DEFAULT_OPERATION_NAME = "default"

OperationT = TypeVar("OperationT", bound="Operation")


class Operation(HasSelectionSet):
    """Interface for the operations of a document.

    Inherited by
    :class:`QueryOperation <gql_builder.document.QueryOperation>` and
    :class:`MutationOperation <gql_builder.document.MutationOperation>`

    Instances are created with the :meth:`add_query <Document.add_query>`
    and :meth:`add_mutation <Document.add_mutation>` methods.
    """

    operation_type: OperationType

    def __init__(self, document: "Document", name: str = DEFAULT_OPERATION_NAME):
        self.document = document
        self._name = name
        self.selection_set = SelectionSet()
        log.debug(f"Creating {self!r}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def resolver_type(self) -> Optional[GraphQLNamedType]:
        return get_root_type(self.document.schema, self.operation_type)

    def to_query(self, indent: str = "") -> str:
        return (
            f"{indent}{self.operation_type.value} {self.name} {{\n"
            f"{self.selection_set.to_query(indent + INDENT)}\n"
            f"{indent}}}"
        )

    __str__ = to_query

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class QueryOperation(Operation):
    operation_type = OperationType.QUERY


class MutationOperation(Operation):
    operation_type = OperationType.MUTATION


class Fragment(HasSelectionSet):
    """A named fragment defined on a type of the schema.

    Instances are created with the
    :meth:`define_fragment <Document.define_fragment>` method.
    """

    def __init__(self, name: str, type_: GraphQLNamedType, document: "Document"):
        self.name = name
        self.document = document
        self.selection_set = SelectionSet()
        self._type = type_
        log.debug(f"Creating {self!r}")

    @property
    def type(self) -> GraphQLNamedType:
        return self._type

    @property
    def resolver_type(self) -> Optional[GraphQLNamedType]:
        return self._type

    def to_query(self, indent: str = "") -> str:
        return (
            f"{indent}fragment {self.name} on {self._type.name} {{\n"
            f"{self.selection_set.to_query(indent + INDENT)}\n"
            f"{indent}}}"
        )

    __str__ = to_query

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name} on {self._type.name}>"


class Document:
    """The Document is the root of the builder.

    It owns the operations and the fragments, keyed by their name
    in insertion order, and renders them as a GraphQL document.

    .. code-block:: python

        document = Document(schema)

        query = document.add_query("shopQuery")
        shop = query.add_field("shop")
        shop.add_field("name")

        print(document.to_query())
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        builder: Optional[Callable[["Document"], Any]] = None,
    ):
        """Initialize the Document with the given schema.

        :param schema: the GraphQL schema used to find the types of the fragments
        :param builder: an optional callable receiving the new document

        :raises TypeError: if the schema is not an instance of GraphQLSchema
        """

        if not isinstance(schema, GraphQLSchema):
            raise TypeError(
                f"Document needs a schema as parameter. Received: {type(schema)}"
            )

        self._schema: GraphQLSchema = schema
        self.operations: Dict[str, Operation] = {}
        self.fragments: Dict[str, Fragment] = {}

        if builder is not None:
            builder(self)

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    def add_query(
        self,
        name: str = DEFAULT_OPERATION_NAME,
        builder: Optional[Callable[[QueryOperation], Any]] = None,
    ) -> QueryOperation:
        """Add a query operation to the document.

        :param name: the operation name, mandatory if the document
            contains several operations
        :param builder: an optional callable receiving the new operation

        :raises DuplicateOperationName: if the name is already used
        :raises InvalidDocument: if the document would contain
            an unnamed operation among several operations
        """
        return self._add_operation(QueryOperation, name, builder)

    def add_mutation(
        self,
        name: str = DEFAULT_OPERATION_NAME,
        builder: Optional[Callable[[MutationOperation], Any]] = None,
    ) -> MutationOperation:
        """Add a mutation operation to the document.

        See :meth:`add_query` for the parameters and exceptions.
        """
        return self._add_operation(MutationOperation, name, builder)

    def _add_operation(
        self,
        operation_class: Type[OperationT],
        name: str,
        builder: Optional[Callable[[OperationT], Any]],
    ) -> OperationT:

        if name in self.operations:
            raise DuplicateOperationName(
                f"Operation '{name}' is already defined in the document."
            )

        if self.operations and (
            name == DEFAULT_OPERATION_NAME or DEFAULT_OPERATION_NAME in self.operations
        ):
            raise InvalidDocument(
                "All the operations of a document containing "
                "multiple operations must be named."
            )

        operation = operation_class(self, name)

        if builder is not None:
            builder(operation)

        self.operations[name] = operation

        return operation

    def define_fragment(
        self,
        name: str,
        on: str,
        builder: Optional[Callable[[Fragment], Any]] = None,
    ) -> Fragment:
        """Define a named fragment on a type of the schema.

        :param name: the fragment name
        :param on: the name of the type condition of the fragment
        :param builder: an optional callable receiving the new fragment

        :raises DuplicateFragmentName: if the name is already used
        :raises InvalidFragmentTarget: if the type is not found in the schema
            or is not an object, interface or union type
        """

        if name in self.fragments:
            raise DuplicateFragmentName(
                f"Fragment '{name}' is already defined in the document."
            )

        type_ = get_fragment_target(self._schema, on)

        if type_ is None:
            raise InvalidFragmentTarget(
                f"Cannot define fragment '{name}' on '{on}': "
                "type not found in the schema or not selectable."
            )

        fragment = Fragment(name, type_, self)

        if builder is not None:
            builder(fragment)

        self.fragments[name] = fragment

        return fragment

    @property
    def fragment_definitions(self) -> str:
        """All the fragment definitions, separated by a blank line."""
        return "\n".join(
            f"{fragment.to_query()}\n" for fragment in self.fragments.values()
        )

    def to_query(self) -> str:
        """Render the document: the fragment definitions first,
        then the operations in insertion order."""
        blocks = [f"{operation.to_query()}\n" for operation in self.operations.values()]

        if self.fragments:
            blocks.insert(0, self.fragment_definitions)

        return "\n".join(blocks)

    __str__ = to_query

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} operations={list(self.operations)}"
            f" fragments={list(self.fragments)}>"
        )
