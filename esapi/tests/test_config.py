"""Test configuration for esapi package."""

import json
import os
from unittest.mock import patch

import pytest

from esapi.config import ClientConfig, get_config
from esapi.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith('ESAPI_'):
            monkeypatch.delenv(key)


class TestClientConfig:
    """Test ClientConfig model."""

    def test_defaults(self, clean_env):
        config = ClientConfig()
        assert config.addresses == ['http://localhost:9200']
        assert config.username is None
        assert config.api_key is None
        assert config.timeout == 30.0
        assert config.headers == {}
        assert config.verify_certs is True

    def test_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv('ESAPI_ADDRESSES', '["http://es1:9200", "http://es2:9200"]')
        monkeypatch.setenv('ESAPI_API_KEY', 'secret')
        config = ClientConfig()
        assert config.addresses == ['http://es1:9200', 'http://es2:9200']
        assert config.api_key == 'secret'

    def test_keyword_arguments_override_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv('ESAPI_USERNAME', 'from-env')
        assert ClientConfig(username='explicit').username == 'explicit'


class TestGetConfig:
    """Test get_config function."""

    def test_yaml_file(self, tmp_path, clean_env):
        path = tmp_path / 'custom.yaml'
        path.write_text(
            'addresses:\n  - https://es:9243\nusername: elastic\ntimeout: 5\n'
        )
        config = get_config(str(path))
        assert config.addresses == ['https://es:9243']
        assert config.username == 'elastic'
        assert config.timeout == 5.0

    def test_json_file(self, tmp_path, clean_env):
        path = tmp_path / 'custom.json'
        path.write_text(json.dumps({'api_key': 'abc', 'verify_certs': False}))
        config = get_config(str(path))
        assert config.api_key == 'abc'
        assert config.verify_certs is False

    def test_default_file_in_cwd(self, tmp_path, clean_env):
        (tmp_path / 'esapi.yml').write_text('addresses: ["http://cwd:9200"]\n')
        with patch('os.getcwd', return_value=str(tmp_path)):
            config = get_config()
        assert config.addresses == ['http://cwd:9200']

    def test_pyproject(self, tmp_path, clean_env):
        (tmp_path / 'pyproject.toml').write_text(
            '[tool.esapi]\naddresses = ["http://pyproject:9200"]\ntimeout = 1.5\n'
        )
        with patch('os.getcwd', return_value=str(tmp_path)):
            config = get_config()
        assert config.addresses == ['http://pyproject:9200']
        assert config.timeout == 1.5

    def test_defaults_without_files(self, tmp_path, clean_env):
        with patch('os.getcwd', return_value=str(tmp_path)):
            config = get_config()
        assert config.addresses == ['http://localhost:9200']

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(tmp_path / 'missing.yaml'))
        assert exc_info.value.config_path.endswith('missing.yaml')

    def test_unparseable_file(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text('addresses: [unclosed')
        with pytest.raises(ConfigurationError):
            get_config(str(path))

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text('- a\n- b\n')
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))
        assert 'mapping' in str(exc_info.value)

    def test_invalid_field(self, tmp_path, clean_env):
        path = tmp_path / 'bad.yaml'
        path.write_text('timeout: soon\n')
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))
        assert exc_info.value.field == 'timeout'
        assert '(field: timeout)' in str(exc_info.value)

    def test_unknown_field(self, tmp_path, clean_env):
        path = tmp_path / 'bad.yaml'
        path.write_text('colour: blue\n')
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))
        assert exc_info.value.field == 'colour'
