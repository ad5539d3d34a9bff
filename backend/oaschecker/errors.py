"""
Exceptions raised by the conformance checker.

Provides:
- ContractLoadError: contract document missing, unreadable or invalid (setup only)
- RouteNotFound: request does not match any documented operation
- ConformanceError: aggregate of every issue recorded by a middleware
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .issues import ValidationIssue


class ContractLoadError(Exception):
    """Raised when a contract document cannot be loaded or parsed."""

    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.source = source


class RouteNotFound(Exception):
    """Raised by the resolver when no documented operation matches."""

    def __init__(self, method: str, url: str, reason: str):
        super().__init__(reason)
        self.method = method
        self.url = url


@dataclass(eq=False)
class ConformanceError(Exception):
    """Aggregate failure describing every recorded validation issue."""
    message: str
    issues: Tuple['ValidationIssue', ...] = field(default_factory=tuple)

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self):
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "message": self.message,
            "issues": [issue.to_dict() for issue in self.issues],
        }
