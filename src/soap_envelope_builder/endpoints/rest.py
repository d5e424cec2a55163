"""REST endpoint registry for mock services.

A companion to the SOAP registry: plain containers for requests, responses
and endpoint definitions, plus a small response-building helper.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from soap_envelope_builder.shared.logging import get_logger

logger = get_logger(__name__, component="rest_endpoints")


class HttpMethod(Enum):
    """HTTP methods supported by endpoint definitions."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class DynamicRequest:
    """Incoming HTTP request.

    Attributes:
        headers: Header name to all of its values
        path_variables: Values captured from the path template, e.g. ``{id}``
        query_params: Query parameter name to all of its values
        body: Raw request body, or None
    """

    headers: Dict[str, List[str]] = field(default_factory=dict)
    path_variables: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, List[str]] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass(frozen=True)
class DynamicResponse:
    """HTTP response returned by a handler."""

    status: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None


DynamicHandler = Callable[[DynamicRequest], DynamicResponse]


class ResponseOptions:
    """Conditional outcomes evaluated in order; the first failing check wins."""

    def __init__(self, builder: "DynamicResponseBuilder") -> None:
        self._builder = builder
        self._failure = False

    def _fail(self, check: bool, status: int, error_body: Any) -> None:
        if not self._failure and check:
            self._failure = True
            self._builder.status = status
            self._builder.body = error_body

    def bad_request(self, check: bool, error_body: Any = None) -> None:
        """Respond 400 when ``check`` holds and nothing has failed yet."""
        self._fail(check, 400, error_body)

    def not_found(self, check: bool, error_body: Any = None) -> None:
        """Respond 404 when ``check`` holds and nothing has failed yet."""
        self._fail(check, 404, error_body)

    def ok(self, success_body: Any = None, check: bool = True) -> None:
        """Respond 200 with ``success_body`` unless an earlier check failed."""
        if not self._failure and check:
            self._builder.status = 200
            self._builder.body = success_body


class DynamicResponseBuilder:
    """Mutable builder for :class:`DynamicResponse`.

    Example:
        >>> builder = DynamicResponseBuilder()
        >>> builder.status = 201
        >>> builder.header("Location", "/api/ghosts/7")
        >>> builder.build().headers
        {'Location': '/api/ghosts/7'}
    """

    def __init__(self) -> None:
        self.status = 200
        self.body: Any = None
        self._headers: Dict[str, str] = {}

    def header(self, key: str, value: str) -> None:
        self._headers[key] = value

    def headers(self, *pairs: Any, **named: str) -> None:
        """Add several headers from ``(key, value)`` pairs and keywords."""
        for key, value in pairs:
            self._headers[key] = value
        self._headers.update(named)

    def options(self, scope: Callable[[ResponseOptions], Any]) -> None:
        """Apply conditional outcomes declared by ``scope``."""
        scope(ResponseOptions(self))

    def build(self) -> DynamicResponse:
        return DynamicResponse(self.status, dict(self._headers), self.body)


@dataclass(frozen=True)
class RestEndpointDefinition:
    """A REST endpoint: method, path template and handler."""

    method: HttpMethod
    path: str
    handler: DynamicHandler


class RestEndpointRegistry:
    """Collects REST endpoints and offers common response shortcuts."""

    def __init__(self) -> None:
        self._endpoints: List[RestEndpointDefinition] = []

    @property
    def endpoints(self) -> List[RestEndpointDefinition]:
        """Registered endpoints in registration order."""
        return list(self._endpoints)

    def register(self, method: HttpMethod, path: str, handler: DynamicHandler) -> None:
        self._endpoints.append(RestEndpointDefinition(method, path, handler))
        logger.debug(
            "Registered REST endpoint",
            extra={"method": method.value, "path": path},
        )

    def get(self, path: str, handler: DynamicHandler) -> None:
        self.register(HttpMethod.GET, path, handler)

    def post(self, path: str, handler: DynamicHandler) -> None:
        self.register(HttpMethod.POST, path, handler)

    def put(self, path: str, handler: DynamicHandler) -> None:
        self.register(HttpMethod.PUT, path, handler)

    def patch(self, path: str, handler: DynamicHandler) -> None:
        self.register(HttpMethod.PATCH, path, handler)

    def delete(self, path: str, handler: DynamicHandler) -> None:
        self.register(HttpMethod.DELETE, path, handler)

    def options(self, path: str, handler: DynamicHandler) -> None:
        self.register(HttpMethod.OPTIONS, path, handler)

    @staticmethod
    def return_body(body: Any) -> DynamicResponse:
        """200 OK carrying ``body``."""
        return DynamicResponse(body=body)

    @staticmethod
    def return_status(status: int) -> DynamicResponse:
        """Empty response with ``status``."""
        return DynamicResponse(status=status)

    @staticmethod
    def return_response(scope: Callable[[DynamicResponseBuilder], Any]) -> DynamicResponse:
        """Build a response with :class:`DynamicResponseBuilder`."""
        builder = DynamicResponseBuilder()
        scope(builder)
        return builder.build()

    def error_on(
        self,
        method: HttpMethod,
        path: str,
        status: int,
        body: Any = None,
        condition: Optional[Callable[[DynamicRequest], bool]] = None,
    ) -> None:
        """Register an endpoint that fails with ``status`` when ``condition`` holds.

        Requests that do not match the condition get ``200 {"status": "ok"}``.
        """
        def handler(request: DynamicRequest) -> DynamicResponse:
            if condition is None or condition(request):
                return DynamicResponse(status=status, body=body)
            return DynamicResponse(status=200, body={"status": "ok"})

        self.register(method, path, handler)


def endpoints(block: Callable[[RestEndpointRegistry], Any]) -> RestEndpointRegistry:
    """Create a registry and let ``block`` register endpoints on it."""
    registry = RestEndpointRegistry()
    block(registry)
    return registry
