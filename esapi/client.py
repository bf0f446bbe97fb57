"""Attribute style facade over the endpoint registry.

    >>> api = API(HttpxTransport(['http://localhost:9200']))
    >>> with api.cat.count(index='logs-2024', format='json') as response:
    ...     print(response.status_code)
"""

from abc import ABC, abstractmethod
from typing import Any

from esapi.endpoint import Endpoint
from esapi.registry import Registry, default_registry
from esapi.request import AsyncResponse, Request, Response

__all__ = ['API', 'AsyncAPI', 'BoundEndpoint', 'Namespace']


class BoundEndpoint:
    """An endpoint tied to the transport of an API object."""

    def __init__(self, api: '_BaseAPI', endpoint: Endpoint):
        self._api = api
        self.endpoint = endpoint
        self.__name__ = endpoint.short_name
        self.__qualname__ = endpoint.name
        self.__doc__ = _docstring(endpoint)

    def __call__(self, *args: Any, **options: Any):
        return self._api._execute(self.endpoint, *args, **options)

    def build_request(self, *args: Any, **options: Any) -> Request:
        return self.endpoint.build_request(*args, **options)

    def __repr__(self) -> str:
        return f'<BoundEndpoint {self.endpoint.signature()}>'


class Namespace:
    """Group of endpoints sharing a dotted prefix, e.g. ``api.indices``."""

    def __init__(self, api: '_BaseAPI', prefix: str):
        self._api = api
        self._prefix = prefix

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(name)
        return self._api._resolve(f'{self._prefix}.{name}')

    def __dir__(self) -> list[str]:
        return self._api._children(self._prefix)

    def __repr__(self) -> str:
        return f'<Namespace {self._prefix}>'


class _BaseAPI(ABC):
    def __init__(self, transport, registry: Registry | None = None):
        self.transport = transport
        # a private copy keeps registrations local to this object
        self.registry = registry if registry is not None else default_registry().copy()

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(name)
        return self._resolve(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._children(None)))

    def _resolve(self, dotted: str):
        if dotted in self.registry:
            return BoundEndpoint(self, self.registry.get(dotted))
        prefix = f'{dotted}.'
        if any(e.name.startswith(prefix) for e in self.registry):
            return Namespace(self, dotted)
        raise AttributeError(f"{type(self).__name__} has no endpoint '{dotted}'")

    def _children(self, prefix: str | None) -> list[str]:
        start = f'{prefix}.' if prefix else ''
        names = set()
        for endpoint in self.registry:
            if endpoint.name.startswith(start):
                names.add(endpoint.name[len(start):].split('.')[0])
        return sorted(names)

    @abstractmethod
    def _execute(self, endpoint: Endpoint, *args: Any, **options: Any):
        """Send ``endpoint`` through the transport."""


class API(_BaseAPI):
    """Synchronous facade: every call returns a :class:`Response`."""

    def perform(self, name: str, *args: Any, **options: Any) -> Response:
        """Call an endpoint by dotted name, e.g. ``api.perform('cat.count')``.

        Raises:
            UnknownEndpointError: If no endpoint has that name.
        """
        return self._execute(self.registry.get(name), *args, **options)

    def _execute(self, endpoint: Endpoint, *args: Any, **options: Any) -> Response:
        return endpoint.perform(self.transport, *args, **options)


class AsyncAPI(_BaseAPI):
    """Asynchronous facade: every call returns an awaitable of :class:`AsyncResponse`."""

    async def perform(self, name: str, *args: Any, **options: Any) -> AsyncResponse:
        return await self._execute(self.registry.get(name), *args, **options)

    async def _execute(
        self, endpoint: Endpoint, *args: Any, **options: Any
    ) -> AsyncResponse:
        return await endpoint.perform_async(self.transport, *args, **options)


def _docstring(endpoint: Endpoint) -> str:
    lines = [endpoint.signature(), '']
    if endpoint.documentation:
        lines += [f'See {endpoint.documentation}', '']
    for part in endpoint.parts.values():
        line = f'{part.python_name}: path part ({part.kind.value})'
        if part.description:
            line += f', {part.description}'
        lines.append(line)
    for param in endpoint.params.values():
        line = f'{param.python_name}: {param.kind.value}'
        if param.description:
            line += f', {param.description}'
        lines.append(line)
    return '\n'.join(lines).rstrip()

