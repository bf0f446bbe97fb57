"""Transport protocol and the bundled httpx transports.

A transport is anything with a ``perform(request)`` method that sends an
:class:`~esapi.request.Request` and returns the :class:`httpx.Response`.
Endpoints call it exactly once per request; retries, sniffing and node
health checks are left to custom transports.
"""

import logging
import threading
from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

import httpx

from esapi.config import ClientConfig
from esapi.exceptions import TransportError
from esapi.request import Request

__all__ = ['AsyncHttpxTransport', 'AsyncTransport', 'HttpxTransport', 'Transport']

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS = 'http://localhost:9200'
DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class Transport(Protocol):
    def perform(self, request: Request) -> httpx.Response: ...


@runtime_checkable
class AsyncTransport(Protocol):
    async def perform(self, request: Request) -> httpx.Response: ...


class _BaseHttpxTransport:
    def __init__(
        self,
        addresses: Sequence[str] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        auth: httpx.Auth | tuple[str, str] | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ):
        self.addresses = [a.rstrip('/') for a in addresses or [DEFAULT_ADDRESS]]
        self.headers = dict(headers or {})
        self.auth = auth
        self.timeout = timeout
        self._cursor = 0
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs):
        """Create a transport from a :class:`ClientConfig`."""
        headers = dict(config.headers)
        if config.api_key:
            headers['Authorization'] = f'ApiKey {config.api_key}'
        auth = None
        if config.username is not None:
            auth = httpx.BasicAuth(config.username, config.password or '')
        kwargs.setdefault('verify', config.verify_certs)
        return cls(
            config.addresses,
            headers=headers,
            auth=auth,
            timeout=config.timeout,
            **kwargs,
        )

    def next_address(self) -> str:
        with self._lock:
            address = self.addresses[self._cursor % len(self.addresses)]
            self._cursor += 1
        return address

    def _timeout(self, request: Request) -> httpx.Timeout:
        timeout = self.timeout
        if request.context is not None:
            remaining = request.context.remaining()
            if remaining is not None and (timeout is None or remaining < timeout):
                timeout = remaining
        return httpx.Timeout(timeout)

    def _send_options(self) -> dict:
        # leave auth configured on a caller supplied client alone
        return {} if self.auth is None else {'auth': self.auth}

    def _build(self, client: httpx.Client | httpx.AsyncClient, request: Request, content):
        url = self.next_address() + request.url
        # defaults first; request headers are appended, never replacing them
        headers = httpx.Headers([*self.headers.items(), *request.headers])
        return client.build_request(
            request.method,
            url,
            content=content,
            headers=headers,
            timeout=self._timeout(request),
        )


class HttpxTransport(_BaseHttpxTransport):
    """Synchronous transport over :class:`httpx.Client`.

    Example:
        >>> transport = HttpxTransport(['http://es1:9200', 'http://es2:9200'])
        >>> api = API(transport)
    """

    def __init__(
        self,
        addresses: Sequence[str] | None = None,
        *,
        client: httpx.Client | None = None,
        verify: bool = True,
        **kwargs,
    ):
        super().__init__(addresses, **kwargs)
        self._owns_client = client is None
        self.client = client or httpx.Client(verify=verify)

    def perform(self, request: Request) -> httpx.Response:
        if request.context is not None:
            request.context.check()

        http_request = self._build(self.client, request, request.body)
        logger.debug('%s %s', http_request.method, http_request.url)
        try:
            response = self.client.send(http_request, stream=True, **self._send_options())
        except httpx.TransportError as e:
            logger.warning(
                'Request %s %s failed: %s', http_request.method, http_request.url, e
            )
            raise TransportError(str(http_request.url), cause=e) from e
        logger.debug(
            '%s %s -> %d', http_request.method, http_request.url, response.status_code
        )
        return response

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> 'HttpxTransport':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncHttpxTransport(_BaseHttpxTransport):
    """Asynchronous transport over :class:`httpx.AsyncClient`."""

    def __init__(
        self,
        addresses: Sequence[str] | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        verify: bool = True,
        **kwargs,
    ):
        super().__init__(addresses, **kwargs)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(verify=verify)

    async def perform(self, request: Request) -> httpx.Response:
        if request.context is not None:
            request.context.check()

        body = request.body
        # AsyncClient cannot stream from blocking file objects or iterators
        if hasattr(body, 'read'):
            body = body.read()
        elif not isinstance(body, (bytes, bytearray, str, type(None))) and not hasattr(
            body, '__aiter__'
        ):
            body = b''.join(body)

        http_request = self._build(self.client, request, body)
        logger.debug('%s %s', http_request.method, http_request.url)
        try:
            response = await self.client.send(
                http_request, stream=True, **self._send_options()
            )
        except httpx.TransportError as e:
            logger.warning(
                'Request %s %s failed: %s', http_request.method, http_request.url, e
            )
            raise TransportError(str(http_request.url), cause=e) from e
        logger.debug(
            '%s %s -> %d', http_request.method, http_request.url, response.status_code
        )
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> 'AsyncHttpxTransport':
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
