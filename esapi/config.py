import json
import os
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from esapi.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['esapi.yaml', 'esapi.yml']


class ClientConfig(BaseSettings):
    """Connection settings for the bundled transports.

    Values can also come from the environment, e.g. ``ESAPI_ADDRESSES``
    (a JSON list) or ``ESAPI_API_KEY``.
    """

    model_config = SettingsConfigDict(env_prefix='ESAPI_')

    addresses: list[str] = Field(
        default_factory=lambda: ['http://localhost:9200'],
        description='Base URLs of the cluster nodes, used round-robin.',
    )

    username: str | None = Field(None, description='User for HTTP basic auth.')

    password: str | None = Field(None, description='Password for HTTP basic auth.')

    api_key: str | None = Field(
        None, description='Base64 encoded API key, sent as "ApiKey <key>".'
    )

    timeout: float | None = Field(
        30.0, description='Default request timeout in seconds, None to disable.'
    )

    headers: dict[str, str] = Field(
        default_factory=dict, description='Headers added to every request.'
    )

    verify_certs: bool = Field(True, description='Verify TLS certificates.')


def load_yaml(path: str | Path) -> dict:
    return yaml.safe_load(Path(path).read_text()) or {}


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _validate(data: dict, path: str | Path | None = None) -> ClientConfig:
    try:
        # keyword arguments take precedence over ESAPI_* environment variables
        return ClientConfig(**data)
    except ValidationError as e:
        error = e.errors()[0]
        field = '.'.join(str(loc) for loc in error['loc']) or None
        raise ConfigurationError(
            f'Invalid configuration: {error["msg"]}',
            config_path=str(path) if path else None,
            field=field,
        ) from e


def _load_file(path: str | Path) -> ClientConfig:
    try:
        if str(path).endswith('.json'):
            data = load_json(path)
        else:
            data = load_yaml(path)
    except FileNotFoundError as e:
        raise ConfigurationError('Config file not found', config_path=str(path)) from e
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f'Cannot parse config file: {e}', config_path=str(path)
        ) from e
    if not isinstance(data, dict):
        raise ConfigurationError('Config must be a mapping', config_path=str(path))
    return _validate(data, path)


def get_config(path: str | None = None) -> ClientConfig:
    """Load configuration from a file, or fall back to environment and defaults."""
    if path:
        return _load_file(path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _load_file(path)

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        pyproject = tomllib.loads(path.read_text())
        tools = pyproject.get('tool', {})

        if 'esapi' in tools:
            return _validate(tools['esapi'], path)

    return _validate({})
