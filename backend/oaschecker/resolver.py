"""
Contract resolver - maps a request method + URL to a documented operation.

Thin adapter over openapi-core's API-call path finder. The finder is built
once per loaded contract and only read afterwards, so one resolver is shared
by every middleware a Checker creates.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
from urllib.parse import urlsplit, urlunsplit

from openapi_core import OpenAPI
from openapi_core.templating.paths.exceptions import PathError
from openapi_core.templating.paths.finders import APICallPathFinder

from .errors import RouteNotFound


@dataclass(frozen=True)
class ResolvedOperation:
    """A documented operation matched for one exchange."""
    method: str
    path_pattern: str
    path_params: Dict[str, Any] = field(default_factory=dict)
    operation: Any = field(default=None, repr=False, compare=False)


class ContractResolver:
    """Resolve requests against the paths and servers of one contract."""

    def __init__(self, openapi: OpenAPI):
        self._finder = APICallPathFinder(openapi.spec)

    def resolve(self, method: str, url: str) -> ResolvedOperation:
        """
        Find the documented operation for a request.

        Args:
            method: HTTP method, any case
            url: Absolute request URL; query string and fragment are ignored

        Returns:
            ResolvedOperation with the matched path template and the
            extracted path parameters

        Raises:
            RouteNotFound: No server, path or operation matches
        """
        scheme, netloc, path, _, _ = urlsplit(url)
        full_url = urlunsplit((scheme, netloc, path, '', ''))

        try:
            found = self._finder.find(method.lower(), full_url)
        except PathError as exc:
            raise RouteNotFound(method, url, str(exc)) from exc

        return ResolvedOperation(
            method=method.lower(),
            path_pattern=found.path_result.pattern,
            path_params=dict(found.path_result.variables),
            operation=found.operation,
        )
