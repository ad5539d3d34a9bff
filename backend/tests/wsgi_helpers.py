"""
WSGI helpers for driving the middleware without a server.
"""

from werkzeug.test import EnvironBuilder, run_wsgi_app


PETSTORE_BASE_URL = "http://petstore.swagger.io"
PETS_BODY = b'[{"id": 123, "name": "Buddy"}]'


def make_handler(status="200 OK", headers=None, body=b"", calls=None):
    """
    Build a WSGI app returning a fixed response.

    When `calls` is a list, each invocation appends the request body it read.
    """
    def handler(environ, start_response):
        if calls is not None:
            length = int(environ.get("CONTENT_LENGTH") or 0)
            calls.append(environ["wsgi.input"].read(length))
        start_response(status, list(headers or []))
        return [body] if body else []

    return handler


def build_environ(path, method="GET", data=None, headers=None):
    return EnvironBuilder(
        path=path,
        base_url=PETSTORE_BASE_URL,
        method=method,
        data=data,
        headers=headers,
    ).get_environ()


def call_wsgi(app, path, method="GET", data=None, headers=None):
    """
    Run one raw WSGI exchange.

    Returns:
        (status line, header list, body bytes) exactly as the caller saw them
    """
    environ = build_environ(path, method=method, data=data, headers=headers)
    app_iter, status, response_headers = run_wsgi_app(app, environ, buffered=True)
    try:
        body = b"".join(app_iter)
    finally:
        if hasattr(app_iter, "close"):
            app_iter.close()
    return status, response_headers.to_wsgi_list(), body
