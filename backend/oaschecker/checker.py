"""
Checker - loads one contract document and mints conformance middleware.

Parsing and validating an OpenAPI document is expensive, so a Checker does it
once and shares the resulting resolver and engine, read-only, with every
middleware it creates. Each middleware gets its own IssueLog.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import yaml
from openapi_core import OpenAPI

from .config import Options
from .engine import ConformanceEngine
from .errors import ContractLoadError
from .issues import IssueLog
from .middleware import ConformanceMiddleware
from .resolver import ContractResolver


logger = logging.getLogger('oaschecker.checker')

HTTP_METHODS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch', 'trace')


class Checker:
    """Owns a loaded contract and wraps WSGI apps with ConformanceMiddleware."""

    def __init__(self, openapi: OpenAPI, document: Dict[str, Any], options: Optional[Options] = None):
        self.options = options or Options()
        self.document = document
        self.resolver = ContractResolver(openapi)
        self.engine = ConformanceEngine(openapi)

    @classmethod
    def from_options(cls, options: Options) -> "Checker":
        """
        Load the contract named by options.file.

        Raises:
            ContractLoadError: No file configured, or it cannot be loaded
        """
        if options.file is None:
            raise ContractLoadError(
                "No contract document configured (set OAS_CHECKER_SPEC_PATH or pass file=)"
            )

        path = Path(options.file)
        document = _read_document(path)
        base_uri = path.resolve().as_uri()
        openapi = _build_openapi(lambda: OpenAPI.from_dict(document, base_uri=base_uri), str(path))
        checker = cls(openapi, document, options)
        logger.info(
            "contract_loaded source=%s operations=%d", path, len(checker.operations())
        )
        return checker

    @classmethod
    def from_file(cls, path: Union[str, Path], **options) -> "Checker":
        return cls.from_options(Options(file=path, **options))

    @classmethod
    def from_env(cls, **overrides) -> "Checker":
        return cls.from_options(Options.from_env(**overrides))

    @classmethod
    def from_dict(cls, document: Dict[str, Any], **options) -> "Checker":
        """Build a checker from an already-parsed contract document."""
        if not isinstance(document, dict):
            raise ContractLoadError("Contract document must be a mapping", source="<dict>")
        openapi = _build_openapi(lambda: OpenAPI.from_dict(document), "<dict>")
        return cls(openapi, document, Options(**options))

    def middleware(self, app: Callable, issues: Optional[IssueLog] = None) -> ConformanceMiddleware:
        """Wrap a WSGI application. The middleware is itself a WSGI application."""
        return ConformanceMiddleware(
            app,
            resolver=self.resolver,
            engine=self.engine,
            issues=issues,
            log_issues=self.options.log_issues,
        )

    def operations(self) -> List[Tuple[str, str]]:
        """Documented (METHOD, path) pairs, in document order."""
        operations = []
        for path, item in (self.document.get('paths') or {}).items():
            if not isinstance(item, dict):
                continue
            for method in HTTP_METHODS:
                if method in item:
                    operations.append((method.upper(), path))
        return operations


def _read_document(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding='utf-8') as fh:
            document = yaml.safe_load(fh)
    except OSError as exc:
        raise ContractLoadError(f"Cannot read contract document {path}: {exc}", source=str(path)) from exc
    except yaml.YAMLError as exc:
        raise ContractLoadError(f"Cannot parse contract document {path}: {exc}", source=str(path)) from exc

    if not isinstance(document, dict):
        raise ContractLoadError(f"Contract document {path} must be a mapping", source=str(path))
    return document


def _build_openapi(factory: Callable[[], OpenAPI], source: str) -> OpenAPI:
    # Spec validation errors have no common base class.
    try:
        return factory()
    except Exception as exc:
        raise ContractLoadError(f"Invalid contract document {source}: {exc}", source=source) from exc
