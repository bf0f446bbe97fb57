"""Test the endpoint registry and spec loading."""

import json
import logging
from unittest.mock import patch

import httpx
import pytest
import yaml

from esapi.endpoint import Endpoint
from esapi.exceptions import SpecLoadError, SpecValidationError, UnknownEndpointError
from esapi.registry import Registry, default_registry

from .fixtures import COMMON_SPEC, DEMO_SPEC, LEGACY_SPEC


class TestRegistry:
    """Test registration and lookup."""

    def test_register_and_get(self):
        registry = Registry()
        endpoint = Endpoint.from_spec('demo.get', DEMO_SPEC['demo.get'])
        registry.register(endpoint)
        assert registry.get('demo.get') is endpoint
        assert 'demo.get' in registry
        assert len(registry) == 1

    def test_unknown_endpoint(self):
        with pytest.raises(UnknownEndpointError) as exc_info:
            Registry().get('nope')
        assert exc_info.value.name == 'nope'
        assert isinstance(exc_info.value, LookupError)

    def test_iteration_sorted_by_name(self):
        registry = Registry()
        registry.load_spec({**LEGACY_SPEC, **DEMO_SPEC})
        assert [e.name for e in registry] == ['demo.get', 'demo.search']

    def test_underscore_entries_skipped(self):
        registry = Registry()
        loaded = registry.load_spec({**COMMON_SPEC, **DEMO_SPEC})
        assert [e.name for e in loaded] == ['demo.get']

    def test_top_level_must_be_mapping(self):
        with pytest.raises(SpecValidationError):
            Registry().load_spec(['demo.get'])


class TestDefaultRegistry:
    """Test the built-in endpoint table."""

    def test_cached(self):
        assert default_registry() is default_registry()

    def test_namespaces(self):
        namespaces = default_registry().namespaces()
        for namespace in ('cat', 'cluster', 'indices', 'ingest', 'ml', 'nodes', 'snapshot', 'tasks'):
            assert namespace in namespaces

    def test_top_level_endpoints(self):
        names = [e.name for e in default_registry().in_namespace(None)]
        for name in ('bulk', 'count', 'get', 'index', 'info', 'search'):
            assert name in names

    def test_every_endpoint_builds_with_minimal_arguments(self):
        for endpoint in default_registry():
            args = ['x' for _ in endpoint.required_parts]
            if endpoint.body is not None and endpoint.body.required:
                args.append({})
            request = endpoint.build_request(*args)
            assert request.path.startswith('/')
            assert request.method in ('GET', 'HEAD', 'POST', 'PUT', 'DELETE')


class TestLoad:
    """Test loading REST API spec files."""

    def test_load_json_file(self, tmp_path):
        path = tmp_path / 'demo.get.json'
        path.write_text(json.dumps(DEMO_SPEC))
        registry = Registry()
        loaded = registry.load(path)
        assert [e.name for e in loaded] == ['demo.get']

    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / 'demo.yaml'
        path.write_text(yaml.safe_dump(LEGACY_SPEC))
        registry = Registry()
        registry.load(str(path))
        assert registry.get('demo.search').parts['index'].kind.value == 'list'

    def test_load_directory(self, tmp_path, caplog):
        (tmp_path / 'demo.get.json').write_text(json.dumps(DEMO_SPEC))
        (tmp_path / 'demo.search.yml').write_text(yaml.safe_dump(LEGACY_SPEC))
        (tmp_path / '_common.json').write_text(json.dumps(COMMON_SPEC))
        (tmp_path / 'README.md').write_text('not a spec')

        registry = Registry()
        with caplog.at_level(logging.INFO, logger='esapi.registry'):
            loaded = registry.load(tmp_path)

        assert sorted(e.name for e in loaded) == ['demo.get', 'demo.search']
        assert 'README.md' in caplog.text
        assert 'Loaded 2 endpoints' in caplog.text

    def test_missing_source(self, tmp_path):
        with pytest.raises(SpecLoadError) as exc_info:
            Registry().load(tmp_path / 'missing.json')
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{"demo.get": ')
        with pytest.raises(SpecLoadError) as exc_info:
            Registry().load(path)
        assert str(path) in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text('demo: [unclosed')
        with pytest.raises(SpecLoadError):
            Registry().load(path)

    def test_invalid_entry(self, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps({'bad': {'url': {'paths': [{'path': 'x'}]}}}))
        with pytest.raises(SpecValidationError) as exc_info:
            Registry().load(path)
        assert exc_info.value.source == 'bad'

    def test_load_url(self):
        response = httpx.Response(
            200,
            text=json.dumps(DEMO_SPEC),
            request=httpx.Request('GET', 'https://example.com/demo.get.json'),
        )
        with patch('esapi.registry.httpx.get', return_value=response) as mock_get:
            registry = Registry()
            registry.load('https://example.com/demo.get.json')
        mock_get.assert_called_once()
        assert 'demo.get' in registry

    def test_load_url_http_error(self):
        response = httpx.Response(
            404, request=httpx.Request('GET', 'https://example.com/missing.json')
        )
        with patch('esapi.registry.httpx.get', return_value=response):
            with pytest.raises(SpecLoadError) as exc_info:
                Registry().load('https://example.com/missing.json')
        assert isinstance(exc_info.value.cause, httpx.HTTPStatusError)
