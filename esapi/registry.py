"""Endpoint registry and REST API spec loading.

The registry maps dotted endpoint names onto :class:`~esapi.endpoint.Endpoint`
descriptors. The default registry is built from the table in :mod:`esapi.api`;
further descriptors can be read from REST API spec files, either a single
JSON/YAML file, a directory of them or a URL.
"""

import json
import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import yaml

from esapi.endpoint import Endpoint
from esapi.exceptions import SpecLoadError, SpecValidationError, UnknownEndpointError

__all__ = ['Registry', 'default_registry']

logger = logging.getLogger(__name__)

SPEC_SUFFIXES = ('.json', '.yaml', '.yml')


class Registry:
    """A collection of endpoints addressable by dotted name.

    Example:
        >>> registry = Registry()
        >>> registry.load('rest-api-spec/api')
        >>> registry.get('cat.count').method
        'GET'
    """

    def __init__(self, endpoints: Mapping[str, Endpoint] | None = None):
        self._endpoints: dict[str, Endpoint] = dict(endpoints or {})

    def register(self, endpoint: Endpoint) -> Endpoint:
        """Add or replace an endpoint."""
        self._endpoints[endpoint.name] = endpoint
        return endpoint

    def get(self, name: str) -> Endpoint:
        try:
            return self._endpoints[name]
        except KeyError:
            raise UnknownEndpointError(name) from None

    def namespaces(self) -> list[str]:
        return sorted({e.namespace for e in self if e.namespace is not None})

    def in_namespace(self, namespace: str | None) -> list[Endpoint]:
        """Endpoints directly under ``namespace``; None selects top level."""
        return [e for e in self if e.namespace == namespace]

    def copy(self) -> 'Registry':
        """Independent registry holding the same endpoints."""
        return Registry(self._endpoints)

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __iter__(self) -> Iterator[Endpoint]:
        for name in sorted(self._endpoints):
            yield self._endpoints[name]

    def __len__(self) -> int:
        return len(self._endpoints)

    def load_spec(self, spec: Mapping[str, Any], source: str = '<dict>') -> list[Endpoint]:
        """Register every entry of a name → descriptor mapping.

        Keys starting with an underscore (such as ``_common``) are not
        endpoints and are ignored.

        Raises:
            SpecValidationError: If an entry is malformed.
        """
        if not isinstance(spec, Mapping):
            raise SpecValidationError(source, ['top level must be a mapping'])
        loaded = []
        for name, entry in spec.items():
            if name.startswith('_'):
                continue
            loaded.append(self.register(Endpoint.from_spec(name, entry)))
        return loaded

    def load(self, source: str | Path) -> list[Endpoint]:
        """Load REST API spec files from a file, a directory or a URL.

        Args:
            source: Path to a ``.json``/``.yaml`` file, a directory holding
                such files, or an http(s) URL of one file.

        Returns:
            The endpoints that were registered.

        Raises:
            SpecLoadError: If the source cannot be read or parsed.
            SpecValidationError: If a descriptor is malformed.
        """
        source = str(source)
        if _is_url(source):
            return self.load_spec(_parse(source, _fetch(source)), source)

        path = Path(source)
        if not path.exists():
            raise SpecLoadError(source, cause=FileNotFoundError(source))
        if path.is_file():
            return self._load_file(path)

        logger.info('Loading API specs from %s', path)
        loaded = []
        for child in sorted(path.iterdir()):
            if child.name.startswith('_'):
                continue
            if not child.is_file() or child.suffix not in SPEC_SUFFIXES:
                logger.warning('Skipping %s: not an API spec file', child)
                continue
            loaded += self._load_file(child)
        logger.info('Loaded %d endpoints from %s', len(loaded), path)
        return loaded

    def _load_file(self, path: Path) -> list[Endpoint]:
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise SpecLoadError(str(path), cause=e)
        endpoints = self.load_spec(_parse(str(path), text), str(path))
        logger.debug('Loaded %d endpoints from %s', len(endpoints), path)
        return endpoints


def _is_url(text: str) -> bool:
    return urlparse(text).scheme in ('http', 'https')


def _fetch(url: str) -> str:
    logger.info('Fetching API spec from %s', url)
    try:
        response = httpx.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise SpecLoadError(url, cause=e)
    return response.text


def _parse(source: str, text: str) -> Any:
    try:
        if source.endswith('.json'):
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SpecLoadError(source, cause=e)


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Registry of the built-in endpoint table, built on first use."""
    from esapi.api import SPECS

    registry = Registry()
    registry.load_spec(SPECS, 'esapi.api')
    return registry
