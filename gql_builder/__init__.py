"""The primary :mod:`gql_builder` package includes everything you need to
build GraphQL documents and send them:

 - the :class:`Document <gql_builder.Document>` class, root of the builder,
   owning the operations and the fragments
 - the :class:`Client <gql_builder.Client>` class binding a schema
   and a transport
 - the :class:`RequestsHTTPTransport <gql_builder.RequestsHTTPTransport>`
   transport sending documents over http(s)
"""

from contextlib import suppress

from .__version__ import __version__
from .arguments import EnumValue
from .client import Client
from .document import (
    DEFAULT_OPERATION_NAME,
    Document,
    Fragment,
    MutationOperation,
    Operation,
    QueryOperation,
)
from .graphql_request import GraphQLRequest
from .selection_set import Field, FragmentSpread, InlineFragment, SelectionSet

with suppress(ModuleNotFoundError):
    from .transport.requests import RequestsHTTPTransport

__all__ = [
    "__version__",
    "DEFAULT_OPERATION_NAME",
    "Client",
    "Document",
    "EnumValue",
    "Field",
    "Fragment",
    "FragmentSpread",
    "GraphQLRequest",
    "InlineFragment",
    "MutationOperation",
    "Operation",
    "QueryOperation",
    "RequestsHTTPTransport",
    "SelectionSet",
]
