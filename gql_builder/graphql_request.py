from typing import Any, Dict, Optional, Union

from .document import Document


class GraphQLRequest:
    """GraphQL Request to be sent by a transport."""

    def __init__(
        self,
        request: Union[Document, "GraphQLRequest", str],
        *,
        operation_name: Optional[str] = None,
    ):
        """Initialize a GraphQL request.

        :param request: the rendered GraphQL document as a string,
            or a :class:`Document <gql_builder.Document>` which will be rendered.
        :param operation_name: Name of the operation that shall be executed.
            Only required in multi-operation documents (Default: None).
        """
        if isinstance(request, str):
            self.query = request
        elif isinstance(request, Document):
            self.query = request.to_query()
        elif isinstance(request, GraphQLRequest):
            self.query = request.query
            if operation_name is None:
                operation_name = request.operation_name
        else:
            raise TypeError(f"Unexpected type for GraphQLRequest: {type(request)}")

        self.operation_name: Optional[str] = operation_name

    @property
    def payload(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "variables": {},
            "operation_name": self.operation_name,
        }

    def __str__(self):
        return str(self.payload)
