import abc
from typing import Any

from graphql import ExecutionResult

from ..graphql_request import GraphQLRequest


class Transport(abc.ABC):
    @abc.abstractmethod
    def execute(
        self,
        request: GraphQLRequest,
        *args: Any,
        **kwargs: Any,
    ) -> ExecutionResult:
        """Execute GraphQL query.

        Send the provided request to a remote GraphQL server.

        :param request: GraphQL request as a GraphQLRequest object.
        :return: ExecutionResult
        """
        raise NotImplementedError(
            "Any Transport subclass must implement execute method"
        )  # pragma: no cover

    def connect(self):
        """Open the resources used to send the requests, such as an HTTP session."""
        pass  # pragma: no cover

    def close(self):
        """Release the resources opened by :meth:`connect`.

        Transports without such resources do not have to implement it.
        """
        pass  # pragma: no cover
