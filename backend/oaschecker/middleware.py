"""
Conformance middleware - observational contract validation for WSGI apps.

For every exchange:
1. Resolve method + URL to a documented operation
2. Validate the request against that operation
3. Call the wrapped app once, capturing status, headers and body
4. Replay the captured response to the caller unchanged
5. Validate the captured response (skipped when the body is empty)

Failures never change the response. They are appended to the IssueLog and
surface later through summarize().

Usage:
    checker = Checker.from_file("openapi.yaml")
    app.wsgi_app = checker.middleware(app.wsgi_app)
    ...
    error = app.wsgi_app.summarize()
"""

import io
import logging
from typing import Callable, Iterable, Optional
from urllib.parse import urljoin

from openapi_core.contrib.werkzeug import WerkzeugOpenAPIRequest
from werkzeug.wrappers import Request

from .capture import capture_response, replay
from .engine import ConformanceEngine
from .errors import ConformanceError, RouteNotFound
from .issues import IssueLog
from .resolver import ContractResolver


logger = logging.getLogger('oaschecker.middleware')


class ConformanceMiddleware:
    """WSGI middleware recording contract violations without enforcing them."""

    def __init__(
        self,
        app: Callable,
        resolver: ContractResolver,
        engine: ConformanceEngine,
        issues: Optional[IssueLog] = None,
        log_issues: bool = True,
    ):
        self.app = app
        self.resolver = resolver
        self.engine = engine
        self.issues = issues if issues is not None else IssueLog()
        self.log_issues = log_issues

    def __call__(self, environ: dict, start_response: Callable) -> Iterable[bytes]:
        request = _buffer_request(environ)
        openapi_request = ContractRequest(request)
        method = request.method
        uri = request.url

        # The engine matches the route again itself; resolving here separates
        # route-not-found from validation failures and skips validation.
        try:
            operation = self.resolver.resolve(
                method, urljoin(openapi_request.host_url, openapi_request.path)
            )
        except RouteNotFound as exc:
            self._add_issue(method, uri, f"Route not found in specification: {exc}")
            return self.app(environ, start_response)

        logger.debug(
            "conformance_exchange method=%s uri=%s path=%s path_params=%s",
            method, uri, operation.path_pattern, operation.path_params,
        )

        error = self.engine.validate_request(openapi_request)
        if error is not None:
            self._add_issue(method, uri, f"Invalid request: {error}")

        captured = capture_response(self.app, environ)
        body = replay(captured, start_response)

        if captured.data:
            error = self.engine.validate_response(openapi_request, captured)
            if error is not None:
                self._add_issue(method, uri, f"Invalid response: {error}")

        return body

    def summarize(self) -> Optional[ConformanceError]:
        """Aggregate error for every issue recorded so far, or None."""
        return self.issues.summarize()

    def assert_conformant(self) -> None:
        """Raise the aggregate ConformanceError if any issue was recorded."""
        error = self.summarize()
        if error is not None:
            raise error

    def _add_issue(self, method: str, uri: str, description: str) -> None:
        self.issues.add(method, uri, description)
        if self.log_issues:
            logger.warning(
                "conformance_issue method=%s uri=%s description=%s",
                method, uri, description,
            )


class ContractRequest(WerkzeugOpenAPIRequest):
    """Werkzeug request adapter that reports a missing Content-Type as ''."""

    @property
    def content_type(self) -> str:
        return self.request.content_type or ''


def _buffer_request(environ: dict) -> Request:
    """
    Build a validation view of the request with its body read into memory.

    The body stream can only be consumed once, so the original environ gets
    an in-memory stream holding the same bytes for the wrapped app.
    """
    request = Request(dict(environ), populate_request=False)
    body = request.get_data(cache=True)
    environ['wsgi.input'] = io.BytesIO(body)
    return request
