"""
OpenAPI conformance checker for WSGI applications.

This package provides:
- Checker: loads a contract document once and wraps WSGI apps
- ConformanceMiddleware: records request/response contract violations
- IssueLog / ValidationIssue: thread-safe record of those violations
- setup_conformance_middleware: Flask integration
"""

__version__ = "1.0.0"

from .config import Options
from .errors import ContractLoadError, RouteNotFound, ConformanceError
from .issues import IssueLog, ValidationIssue
from .resolver import ContractResolver, ResolvedOperation
from .engine import ConformanceEngine
from .middleware import ConformanceMiddleware
from .checker import Checker
from .integration import setup_conformance_middleware, get_conformance_middleware

__all__ = [
    'Options',
    'ContractLoadError',
    'RouteNotFound',
    'ConformanceError',
    'IssueLog',
    'ValidationIssue',
    'ContractResolver',
    'ResolvedOperation',
    'ConformanceEngine',
    'ConformanceMiddleware',
    'Checker',
    'setup_conformance_middleware',
    'get_conformance_middleware',
]
