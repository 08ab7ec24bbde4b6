import logging
from typing import Any, Callable, Dict, Optional, Union

from graphql import (
    ExecutionResult,
    GraphQLSchema,
    IntrospectionQuery,
    Source,
    parse,
    validate,
)

from .document import Document
from .graphql_request import GraphQLRequest
from .transport.exceptions import TransportQueryError
from .transport.transport import Transport
from .utilities import load_schema
from .utils import str_first_element

log = logging.getLogger(__name__)


class Client:
    """The Client class binds a schema and a transport.

    It creates documents bound to its schema, validates the rendered
    documents locally and sends them with the transport.

    To keep the transport connected between requests,
    use :code:`with client as session:`
    """

    def __init__(
        self,
        *,
        schema: Optional[Union[str, GraphQLSchema]] = None,
        introspection: Optional[IntrospectionQuery] = None,
        transport: Optional[Transport] = None,
    ):
        """Initialize the client with the given parameters.

        :param schema: the GraphQL Schema, as a GraphQLSchema or in the SDL
        :param introspection: the result of an introspection query,
            used to build the schema
        :param transport: The provided transport, used to execute the documents.
        """

        if introspection:
            assert (
                not schema
            ), "Cannot provide introspection and schema at the same time."
            schema = load_schema(introspection)  # type: ignore

        # GraphQL schema
        self.schema: Optional[GraphQLSchema] = (
            load_schema(schema) if schema is not None else None
        )

        assert (
            self.schema is not None or transport is not None
        ), "You need to provide either a transport or a schema to the Client."

        self.transport: Optional[Transport] = transport
        self._connected = False

    def document(
        self, builder: Optional[Callable[[Document], Any]] = None
    ) -> Document:
        """Create a new :class:`Document <gql_builder.Document>`
        bound to the schema of the client."""
        assert self.schema, "Cannot create a document, you need to pass a schema."
        return Document(self.schema, builder)

    def validate(self, request: Union[Document, GraphQLRequest, str]) -> None:
        """Parse the rendered document and validate it against the schema.

        :raises graphql.error.GraphQLError: the first syntax or validation error
        """
        assert (
            self.schema
        ), "Cannot validate the document locally, you need to pass a schema."

        request = GraphQLRequest(request)
        document_ast = parse(Source(request.query, "GraphQL request"))

        validation_errors = validate(self.schema, document_ast)
        if validation_errors:
            raise validation_errors[0]

    def connect(self) -> None:
        assert self.transport is not None, "Cannot connect without a transport."
        self.transport.connect()
        self._connected = True

    def close(self) -> None:
        if self._connected and self.transport is not None:
            self.transport.close()
        self._connected = False

    def __enter__(self) -> "Client":
        self.connect()
        return self

    def __exit__(self, *args):
        self.close()

    def _execute(self, request: GraphQLRequest, **kwargs: Any) -> ExecutionResult:
        assert self.transport is not None, "Cannot execute without a transport."

        if self.schema:
            self.validate(request)

        if self._connected:
            return self.transport.execute(request, **kwargs)

        with self:
            return self.transport.execute(request, **kwargs)

    def execute(
        self,
        request: Union[Document, GraphQLRequest, str],
        *,
        operation_name: Optional[str] = None,
        get_execution_result: bool = False,
        **kwargs: Any,
    ) -> Union[Dict[str, Any], ExecutionResult]:
        """Validate the document and send it with the transport.

        If the client is not connected, the transport is connected
        for this request only.

        :param request: a Document, a rendered document or a GraphQLRequest
        :param operation_name: the operation to execute, required if the
            document contains several operations
        :param get_execution_result: return the full ExecutionResult instance
            instead of only the "data" field.

        The extra arguments are passed to the transport execute method.

        :raises TransportQueryError: if the answer contains errors
        """

        result = self._execute(
            GraphQLRequest(request, operation_name=operation_name), **kwargs
        )

        if result.errors:
            raise TransportQueryError(
                str_first_element(result.errors),
                errors=result.errors,
                data=result.data,
            )

        if get_execution_result:
            return result

        assert (
            result.data is not None
        ), "Transport returned an ExecutionResult without data or errors"

        return result.data
