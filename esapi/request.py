"""Request, response and cancellation context value types.

A :class:`Request` is built fresh for every call and handed to a transport.
A :class:`Response` wraps whatever the transport returned: status code,
headers and an open body stream that the caller owns and must close.
"""

import json
import threading
import time
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any
from urllib.parse import quote

import httpx

from esapi.exceptions import DeadlineExceededError, RequestCancelledError

__all__ = ['Context', 'Request', 'Response', 'AsyncResponse']

HEADER_CONTENT_TYPE = 'Content-Type'
CONTENT_TYPE_JSON = 'application/json'

# Characters left as-is when a path is percent-encoded.
PATH_SAFE = "/,*:@!$&'()+;="


class Context:
    """Cancellation token with an optional deadline.

    The executor only forwards the context on the request; transports decide
    how to honour it. The bundled transports refuse to start a request whose
    context is done and turn the remaining time into the HTTP timeout.

    Example:
        >>> ctx = Context(timeout=5.0)
        >>> api.search(index='logs-*', context=ctx)
        >>> ctx.cancel()  # from another thread
    """

    def __init__(self, timeout: float | None = None, deadline: float | None = None):
        if timeout is not None:
            deadline = time.monotonic() + timeout
        self.deadline = deadline
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def done(self) -> bool:
        return self.cancelled or self.expired

    def remaining(self) -> float | None:
        """Seconds left until the deadline, None when there is no deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def check(self) -> None:
        """Raise if the context is done."""
        if self.cancelled:
            raise RequestCancelledError()
        if self.expired:
            raise DeadlineExceededError()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; returns ``cancelled``."""
        return self._cancelled.wait(timeout)


@dataclass
class Request:
    """One outbound HTTP request, as built by an endpoint."""

    method: str
    path: str
    params: list[tuple[str, str]] = field(default_factory=list)
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: Any = None
    context: Context | None = None

    @property
    def query(self) -> str:
        return str(httpx.QueryParams(self.params))

    @property
    def url(self) -> str:
        """Path and query string, percent-encoded."""
        path = quote(self.path, safe=PATH_SAFE)
        if not self.params:
            return path
        return f'{path}?{self.query}'

    def header_values(self, name: str) -> list[str]:
        lowered = name.lower()
        return [v for k, v in self.headers if k.lower() == lowered]


def _decode_json(raw: bytes) -> Any:
    return json.loads(raw.decode('utf-8')) if raw else None


def _status_line(status_code: int) -> str:
    try:
        return f'{status_code} {HTTPStatus(status_code).phrase}'
    except ValueError:
        return str(status_code)


class _ResponseMixin:
    status_code: int
    headers: httpx.Headers

    def is_error(self) -> bool:
        """True when the server answered with a status above 299."""
        return self.status_code > 299

    def warnings(self) -> list[str]:
        return self.headers.get_list('Warning')

    def has_warnings(self) -> bool:
        return bool(self.warnings())


@dataclass
class Response(_ResponseMixin):
    """Response handed back by :meth:`Endpoint.perform`.

    The body is an open byte stream. Reading it with :meth:`read`,
    :meth:`text` or :meth:`json` consumes and closes it; otherwise the caller
    must call :meth:`close` or use the response as a context manager.
    """

    status_code: int
    headers: httpx.Headers
    body: Iterator[bytes]
    _close: Callable[[], None] = field(default=lambda: None, repr=False)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> 'Response':
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            body=response.iter_bytes(),
            _close=response.close,
        )

    def read(self) -> bytes:
        try:
            return b''.join(self.body)
        finally:
            self.close()

    def text(self, encoding: str = 'utf-8') -> str:
        return self.read().decode(encoding, errors='replace')

    def json(self) -> Any:
        return _decode_json(self.read())

    def close(self) -> None:
        self._close()

    def __enter__(self) -> 'Response':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __str__(self) -> str:
        return f'[{_status_line(self.status_code)}] {self.text()}'


@dataclass
class AsyncResponse(_ResponseMixin):
    """Async counterpart of :class:`Response`.

    ``str()`` gives only the status line, the body is read with :meth:`text`.
    """

    status_code: int
    headers: httpx.Headers
    body: AsyncIterator[bytes]
    _close: Callable[[], Awaitable[None]] | None = field(default=None, repr=False)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> 'AsyncResponse':
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            body=response.aiter_bytes(),
            _close=response.aclose,
        )

    async def aread(self) -> bytes:
        try:
            return b''.join([chunk async for chunk in self.body])
        finally:
            await self.aclose()

    async def text(self, encoding: str = 'utf-8') -> str:
        return (await self.aread()).decode(encoding, errors='replace')

    async def json(self) -> Any:
        return _decode_json(await self.aread())

    async def aclose(self) -> None:
        if self._close is not None:
            await self._close()

    async def __aenter__(self) -> 'AsyncResponse':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def __str__(self) -> str:
        # the body can only be read by awaiting text()
        return f'[{_status_line(self.status_code)}]'
