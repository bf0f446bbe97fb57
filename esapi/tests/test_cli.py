"""Test CLI functionality."""

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
import typer
from typer.testing import CliRunner

from esapi.cli import app, parse_options
from esapi.config import ClientConfig
from esapi.registry import default_registry

from .fixtures import DEMO_SPEC


@pytest.fixture
def runner():
    """Fixture providing CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_config():
    return ClientConfig(addresses=['http://es:9200'])


class TestEndpointsCommand:
    """Test the endpoints command."""

    def test_lists_endpoints(self, runner):
        result = runner.invoke(app, ['endpoints'])
        assert result.exit_code == 0
        assert 'cat.count' in result.stdout
        assert 'search' in result.stdout

    def test_namespace_filter(self, runner):
        result = runner.invoke(app, ['endpoints', '--namespace', 'tasks'])
        assert result.exit_code == 0
        assert 'tasks.list' in result.stdout
        assert 'cat.count' not in result.stdout

    def test_extra_spec(self, runner, tmp_path):
        path = tmp_path / 'demo.json'
        path.write_text(json.dumps(DEMO_SPEC))
        result = runner.invoke(app, ['endpoints', '-n', 'demo', '--spec', str(path)])
        assert result.exit_code == 0
        assert 'demo.get' in result.stdout

    def test_bad_spec(self, runner, tmp_path):
        result = runner.invoke(app, ['endpoints', '--spec', str(tmp_path / 'no.json')])
        assert result.exit_code == 1
        assert 'Error' in result.stdout


class TestDescribeCommand:
    """Test the describe command."""

    def test_describe(self, runner):
        result = runner.invoke(app, ['describe', 'cat.count'])
        assert result.exit_code == 0
        assert 'cat.count(' in result.stdout
        assert '/_cat/count' in result.stdout
        assert 'master_timeout' in result.stdout

    def test_unknown(self, runner):
        result = runner.invoke(app, ['describe', 'cat.nope'])
        assert result.exit_code == 1
        assert "Unknown endpoint 'cat.nope'" in result.stdout


class TestParseOptions:
    """Test key=value parsing."""

    def test_kinds(self):
        endpoint = default_registry().get('search')
        options = parse_options(
            endpoint, ['index=a,b', 'size=5', 'explain=true', 'q=x', 'pretty=', 'filter_path=a,b']
        )
        assert options['index'] == ['a', 'b']
        assert options['size'] == 5
        assert options['explain'] is True
        assert options['query'] == 'x'
        assert options['filter_path'] == ['a', 'b']
        assert options['pretty'] is True

    def test_missing_separator(self):
        with pytest.raises(typer.BadParameter):
            parse_options(default_registry().get('search'), ['pretty'])


class TestRequestCommand:
    """Test the request command."""

    def test_dry_run(self, runner):
        result = runner.invoke(
            app, ['request', 'count', '-p', 'index=logs-2024', '-p', 'pretty=true', '--dry-run']
        )
        assert result.exit_code == 0
        assert 'GET /logs-2024/_count?pretty=true' in result.stdout

    def test_dry_run_with_positional_and_body(self, runner, tmp_path):
        body = tmp_path / 'doc.json'
        body.write_text('{"message": "hi"}')
        result = runner.invoke(
            app,
            ['request', 'index', 'logs', '-p', 'id=1', '--body', str(body), '--dry-run'],
        )
        assert result.exit_code == 0
        assert 'PUT /logs/_doc/1' in result.stdout
        assert 'Content-Type: application/json' in result.stdout
        assert '{"message": "hi"}' in result.stdout

    def test_body_from_stdin(self, runner):
        result = runner.invoke(
            app,
            ['request', 'search', '--body', '-', '--dry-run'],
            input='{"query": {"match_all": {}}}',
        )
        assert result.exit_code == 0
        assert 'GET /_search' in result.stdout
        assert 'match_all' in result.stdout

    def test_unknown_option(self, runner):
        result = runner.invoke(app, ['request', 'info', '-p', 'colour=blue', '--dry-run'])
        assert result.exit_code == 1
        assert 'colour' in result.stdout

    @patch('esapi.cli.HttpxTransport')
    @patch('esapi.cli.get_config')
    def test_sends_request(self, mock_get_config, mock_transport_class, runner, sample_config):
        mock_get_config.return_value = sample_config
        transport = MagicMock()
        transport.perform.return_value = httpx.Response(200, json={'count': 3})
        mock_transport_class.from_config.return_value.__enter__.return_value = transport

        result = runner.invoke(app, ['request', 'count', '-c', 'esapi.yaml'])

        assert result.exit_code == 0
        mock_get_config.assert_called_once_with('esapi.yaml')
        mock_transport_class.from_config.assert_called_once_with(sample_config)
        sent = transport.perform.call_args.args[0]
        assert (sent.method, sent.path) == ('GET', '/_count')
        assert '200' in result.stdout
        assert '"count"' in result.stdout

    @patch('esapi.cli.HttpxTransport')
    @patch('esapi.cli.get_config')
    def test_error_status_exit_code(
        self, mock_get_config, mock_transport_class, runner, sample_config
    ):
        mock_get_config.return_value = sample_config
        transport = MagicMock()
        transport.perform.return_value = httpx.Response(404, json={'found': False})
        mock_transport_class.from_config.return_value.__enter__.return_value = transport

        result = runner.invoke(app, ['request', 'get', 'logs', '1'])

        assert result.exit_code == 1
        assert '404' in result.stdout


class TestVersionCommand:
    """Test the version command."""

    def test_version(self, runner):
        result = runner.invoke(app, ['version'])
        assert result.exit_code == 0
        assert 'esapi version:' in result.stdout
