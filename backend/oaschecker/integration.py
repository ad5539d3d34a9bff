"""
Flask integration - install conformance checking on a Flask app.

Wraps app.wsgi_app so every request served by the app is checked. The
middleware is stored in app.extensions['oaschecker'] for later inspection.
"""

from typing import Optional

from flask import Flask

from .checker import Checker
from .middleware import ConformanceMiddleware


EXTENSION_KEY = 'oaschecker'


def setup_conformance_middleware(app: Flask, checker: Optional[Checker] = None) -> ConformanceMiddleware:
    """
    Set up conformance checking on Flask app.

    Args:
        app: Flask application instance
        checker: Checker to use; built from OAS_CHECKER_* env vars when omitted

    Returns:
        The installed ConformanceMiddleware
    """
    if checker is None:
        checker = Checker.from_env()

    middleware = checker.middleware(app.wsgi_app)
    app.wsgi_app = middleware
    app.extensions[EXTENSION_KEY] = middleware
    return middleware


def get_conformance_middleware(app: Flask) -> Optional[ConformanceMiddleware]:
    return app.extensions.get(EXTENSION_KEY)
