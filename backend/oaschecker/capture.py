"""
Response capture and replay for WSGI applications.

capture_response() runs the wrapped application against a private
start_response and drains its body into memory. replay() hands the captured
status line, header list and body to the real caller unchanged.

CapturedResponse also exposes data/status_code/content_type/headers so it
can be passed directly to the response validator.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from werkzeug.datastructures import Headers
from werkzeug.http import parse_options_header


HeaderList = List[Tuple[str, str]]


class CapturedResponse:
    """Exchange-local buffer for one response produced by the wrapped app."""

    def __init__(self):
        self.status: Optional[str] = None
        self.header_list: HeaderList = []
        self._chunks: List[bytes] = []

    def start_response(self, status: str, headers: HeaderList, exc_info=None) -> Callable[[bytes], None]:
        # Nothing has been sent yet, so a second call with exc_info simply
        # replaces the pending status and headers.
        self.status = status
        self.header_list = list(headers)
        return self.write

    def write(self, chunk: bytes) -> None:
        if chunk:
            self._chunks.append(chunk)

    @property
    def data(self) -> bytes:
        return b"".join(self._chunks)

    @property
    def status_code(self) -> int:
        return int(self.status.split(" ", 1)[0])

    @property
    def headers(self) -> Headers:
        return Headers(self.header_list)

    @property
    def content_type(self) -> str:
        """Bare mimetype of the Content-Type header, "" when absent."""
        value = self.headers.get("Content-Type", "")
        return parse_options_header(value)[0]


def capture_response(app: Callable, environ: dict) -> CapturedResponse:
    """
    Invoke a WSGI application once and buffer its complete response.

    Raises:
        RuntimeError: The application returned without calling start_response
    """
    captured = CapturedResponse()
    app_iter = app(environ, captured.start_response)
    try:
        for chunk in app_iter:
            captured.write(chunk)
    finally:
        close = getattr(app_iter, "close", None)
        if close is not None:
            close()

    if captured.status is None:
        raise RuntimeError("WSGI application returned without calling start_response")
    return captured


def replay(captured: CapturedResponse, start_response: Callable) -> Iterable[bytes]:
    """Send headers and status to the real caller and return the body."""
    start_response(captured.status, list(captured.header_list))
    body = captured.data
    return [body] if body else []
