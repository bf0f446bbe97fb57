"""esapi - a table-driven request layer for the Elasticsearch REST API.

Every REST operation is described by an :class:`Endpoint` descriptor (URL
templates, path parts, query parameters and body). One generic executor turns
call arguments into a :class:`Request`, hands it to a pluggable transport and
wraps the result in a :class:`Response`. Status codes are never interpreted
and nothing is retried.

Quick Start:
    >>> from esapi import API, HttpxTransport
    >>>
    >>> api = API(HttpxTransport(['http://localhost:9200']))
    >>> with api.search(index='logs-*', body={'query': {'match_all': {}}}) as r:
    ...     print(r.status_code, r.json()['hits']['total'])

CLI Usage:
    $ esapi endpoints --namespace cat
    $ esapi describe search
    $ esapi request cat.count -p index=logs-2024 -p format=json
"""

from importlib.metadata import PackageNotFoundError, version

from esapi.client import API, AsyncAPI
from esapi.config import ClientConfig, get_config
from esapi.endpoint import Endpoint
from esapi.exceptions import (
    ConfigurationError,
    ContextError,
    DeadlineExceededError,
    ESAPIError,
    MissingParameterError,
    ParameterValueError,
    RequestCancelledError,
    SpecError,
    SpecLoadError,
    SpecValidationError,
    TransportError,
    UnknownEndpointError,
    UnsupportedParameterError,
)
from esapi.params import ParamKind
from esapi.registry import Registry, default_registry
from esapi.request import AsyncResponse, Context, Request, Response
from esapi.transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport

__all__ = [
    # Facade
    'API',
    'AsyncAPI',
    # Descriptors
    'Endpoint',
    'ParamKind',
    'Registry',
    'default_registry',
    # Request and response
    'Request',
    'Response',
    'AsyncResponse',
    'Context',
    # Transports
    'Transport',
    'AsyncTransport',
    'HttpxTransport',
    'AsyncHttpxTransport',
    # Configuration
    'ClientConfig',
    'get_config',
    # Exceptions
    'ESAPIError',
    'TransportError',
    'ContextError',
    'RequestCancelledError',
    'DeadlineExceededError',
    'UnknownEndpointError',
    'UnsupportedParameterError',
    'MissingParameterError',
    'ParameterValueError',
    'SpecError',
    'SpecLoadError',
    'SpecValidationError',
    'ConfigurationError',
]

try:
    __version__ = version('esapi')
except PackageNotFoundError:
    __version__ = 'unknown'
