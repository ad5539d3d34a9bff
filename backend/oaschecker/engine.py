"""
Conformance engine - request/response validation against the contract.

Wraps openapi-core's validators. Both checks return None when the traffic
conforms and a human-readable description otherwise; they never raise for
a conformance failure.
"""

from typing import Optional, TYPE_CHECKING

from openapi_core import OpenAPI
from openapi_core.exceptions import OpenAPIError

if TYPE_CHECKING:
    from openapi_core.protocols import Request, Response


# Raised by openapi-core's deserializers for undecodable bodies and
# malformed Content-Type parameters, outside its OpenAPIError hierarchy.
ENGINE_ERRORS = (OpenAPIError, ValueError, TypeError)


def _message(exc: BaseException) -> str:
    try:
        return str(exc).strip()
    except (ValueError, TypeError):
        # Some deserialize errors decode the raw body in __str__
        return type(exc).__name__


def describe_error(exc: BaseException) -> str:
    """
    Render a validation error and its chained causes as one line.

    openapi-core wraps the specific failure (e.g. an unknown mimetype) in a
    generic error such as "Request body validation error", so the causes
    carry the useful detail. A cause already quoted by an outer message is
    not repeated.
    """
    messages = []
    seen = set()
    current = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        message = _message(current)
        if message and not any(message in collected for collected in messages):
            messages.append(message)
        current = current.__cause__

    if not messages:
        return type(exc).__name__
    return ": ".join(messages)


class ConformanceEngine:
    """Validate requests and captured responses for one contract."""

    def __init__(self, openapi: OpenAPI):
        self._openapi = openapi

    def validate_request(self, request: "Request") -> Optional[str]:
        try:
            self._openapi.validate_request(request)
        except ENGINE_ERRORS as exc:
            return describe_error(exc)
        return None

    def validate_response(self, request: "Request", response: "Response") -> Optional[str]:
        try:
            self._openapi.validate_response(request, response)
        except ENGINE_ERRORS as exc:
            return describe_error(exc)
        return None
