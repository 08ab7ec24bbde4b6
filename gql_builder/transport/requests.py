import json
import logging
from typing import Any, Callable, Dict, NoReturn, Optional, Union

import requests
from graphql import ExecutionResult
from requests.auth import HTTPBasicAuth
from requests.structures import CaseInsensitiveDict
from yarl import URL

from ..graphql_request import GraphQLRequest
from .exceptions import (
    NetworkError,
    TransportAlreadyConnected,
    TransportClosed,
    TransportConnectionFailed,
    TransportProtocolError,
)
from .transport import Transport

log = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
DEFAULT_HEADERS = {"Accept": JSON_MIME_TYPE, "Content-Type": JSON_MIME_TYPE}


class RequestsHTTPTransport(Transport):
    """Sync Transport used to send rendered documents to remote servers.

    The transport uses the requests library to send HTTP POST requests
    with a JSON body.
    """

    def __init__(
        self,
        url: Union[str, URL],
        headers: Optional[Dict[str, Any]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[int] = None,
        verify: Union[bool, str] = True,
        debug: bool = False,
        json_serialize: Callable = json.dumps,
        json_deserialize: Callable = json.loads,
        **kwargs: Any,
    ):
        """Initialize the transport with the given request parameters.

        :param url: The GraphQL server URL, http or https.
        :param headers: Dictionary of HTTP Headers merged with the default
            JSON headers, overriding them on conflicting keys (Default: None).
        :param username: Username for HTTP basic authentication (Default: None).
        :param password: Password for HTTP basic authentication (Default: None).
        :param timeout: Specifies a default timeout for requests (Default: None).
        :param verify: Either a boolean, in which case it controls whether we verify
            the server's TLS certificate, or a string, in which case it must be a path
            to a CA bundle to use. (Default: True).
        :param debug: Log the queries and the pretty printed answers
            at the INFO level instead of DEBUG (Default: False).
        :param json_serialize: Json serializer callable.
                By default json.dumps() function
        :param json_deserialize: Json deserializer callable.
                By default json.loads() function
        :param kwargs: Optional arguments that ``request`` takes.

        :raises ValueError: if the url scheme is not http or https
        """
        self.url = URL(url)

        if self.url.scheme not in ("http", "https"):
            raise ValueError(
                f"Unsupported url scheme '{self.url.scheme}'. Expected http or https."
            )

        self.headers: Dict[str, Any] = {**DEFAULT_HEADERS, **(headers or {})}
        self.auth = HTTPBasicAuth(username, password or "") if username else None
        self.default_timeout = timeout
        self.verify = verify
        self.debug = debug
        self.json_serialize: Callable = json_serialize
        self.json_deserialize: Callable = json_deserialize
        self.kwargs = kwargs

        self.session: Optional[requests.Session] = None

        self.response_headers: Optional[CaseInsensitiveDict[str]] = None

    @property
    def use_tls(self) -> bool:
        return self.url.scheme == "https"

    @property
    def log_level(self) -> int:
        return logging.INFO if self.debug else logging.DEBUG

    def connect(self):
        if self.session is None:
            self.session = requests.Session()
        else:
            raise TransportAlreadyConnected("Transport is already connected")

    def _prepare_request(
        self, request: GraphQLRequest, *, timeout: Optional[int] = None
    ) -> Dict[str, Any]:

        payload = request.payload

        if self.debug:
            log.info("Query: %s", request.query)

        if log.isEnabledFor(logging.DEBUG):
            log.debug(">>> %s", self.json_serialize(payload))

        post_args: Dict[str, Any] = {
            "headers": self.headers,
            "auth": self.auth,
            "timeout": timeout or self.default_timeout,
            "verify": self.verify,
            "data": self.json_serialize(payload),
        }

        # Pass kwargs to requests post method
        post_args.update(self.kwargs)

        return post_args

    def execute(
        self, request: GraphQLRequest, timeout: Optional[int] = None
    ) -> ExecutionResult:
        """Execute GraphQL query.

        Send the rendered document with a HTTP POST request to the remote server.

        :param request: GraphQL request as a
                        :class:`GraphQLRequest <gql_builder.GraphQLRequest>` object.
        :param timeout: Specifies a default timeout for requests (Default: None).
        :return: The result of execution.
            `data` is the result of executing the query, `errors` is null
            if no errors occurred, and is a non-empty array if an error occurred.

        :raises TransportClosed: if the transport is not connected
        :raises NetworkError: if the server does not answer with a 2xx status
        :raises TransportProtocolError: if the answer is not a GraphQL result
        """

        if not self.session:
            raise TransportClosed("Transport is not connected")

        post_args = self._prepare_request(request, timeout=timeout)

        try:
            response = self.session.request("POST", str(self.url), **post_args)
        except requests.RequestException as e:
            raise TransportConnectionFailed(str(e)) from e

        return self._prepare_result(response)

    @staticmethod
    def _raise_network_error_if_not_success(response: requests.Response) -> None:
        if not 200 <= response.status_code < 300:
            raise NetworkError(
                f"{response.status_code}/{response.reason}", response.status_code
            )

    @classmethod
    def _raise_response_error(cls, resp: requests.Response, reason: str) -> NoReturn:
        result_text = resp.text
        raise TransportProtocolError(
            f"Server did not return a GraphQL result: {reason}: {result_text}"
        )

    def _get_json_result(self, response: requests.Response) -> Any:

        # Saving latest response headers in the transport
        self.response_headers = response.headers

        self._raise_network_error_if_not_success(response)

        try:
            result = self.json_deserialize(response.text)
        except ValueError:
            self._raise_response_error(response, "Not a JSON answer")

        if log.isEnabledFor(self.log_level):
            if self.debug:
                log.info("Response body: \n%s", json.dumps(result, indent=2))
            else:
                log.debug("<<< %s", response.text)

        return result

    def _prepare_result(self, response: requests.Response) -> ExecutionResult:

        result = self._get_json_result(response)

        if not isinstance(result, dict) or (
            "errors" not in result and "data" not in result
        ):
            self._raise_response_error(response, 'No "data" or "errors" keys in answer')

        return ExecutionResult(
            errors=result.get("errors"),
            data=result.get("data"),
            extensions=result.get("extensions"),
        )

    def close(self):
        """Closing the transport by closing the inner session"""
        if self.session:
            self.session.close()
            self.session = None
