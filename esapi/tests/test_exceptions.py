"""Test suite for the esapi exception hierarchy."""

import pytest

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


class TestESAPIError:
    """Tests for the base ESAPIError exception."""

    def test_basic_message(self):
        error = ESAPIError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    @pytest.mark.parametrize(
        'error',
        [
            TransportError('http://es:9200/'),
            RequestCancelledError(),
            DeadlineExceededError(),
            UnknownEndpointError('x'),
            UnsupportedParameterError('search', 'x'),
            MissingParameterError('get', 'id'),
            ParameterValueError('size', 'integer', 'ten'),
            SpecLoadError('api/'),
            SpecValidationError('x'),
            ConfigurationError('bad'),
        ],
    )
    def test_all_errors_share_base(self, error):
        assert isinstance(error, ESAPIError)


class TestTransportError:
    """Tests for TransportError."""

    def test_with_cause(self):
        cause = ConnectionError('refused')
        error = TransportError('http://es:9200/_search', cause=cause)
        assert error.url == 'http://es:9200/_search'
        assert error.cause is cause
        assert str(error) == "Failed to perform request to 'http://es:9200/_search': refused"

    def test_without_cause(self):
        assert str(TransportError('http://es:9200/')) == (
            "Failed to perform request to 'http://es:9200/'"
        )


class TestContextErrors:
    """Tests for cancellation errors."""

    def test_messages(self):
        assert str(RequestCancelledError()) == 'context cancelled'
        assert str(DeadlineExceededError()) == 'context deadline exceeded'

    def test_hierarchy(self):
        assert issubclass(RequestCancelledError, ContextError)
        assert issubclass(DeadlineExceededError, ContextError)


class TestParameterErrors:
    """Tests for errors raised while building requests."""

    def test_unsupported_parameter(self):
        error = UnsupportedParameterError('cat.count', 'colour')
        assert str(error) == "cat.count() got an unexpected parameter 'colour'"
        assert isinstance(error, TypeError)

    def test_unsupported_parameter_with_reason(self):
        error = UnsupportedParameterError('get', 'index', reason='bad call')
        assert str(error) == 'get(): bad call'
        assert error.parameter == 'index'

    def test_missing_parameter(self):
        error = MissingParameterError('get', 'id')
        assert str(error) == "get() missing required argument 'id'"

    def test_parameter_value(self):
        error = ParameterValueError('size', 'integer', 'ten')
        assert str(error) == "Invalid value 'ten' for integer parameter 'size'"
        assert isinstance(error, ValueError)

    def test_unknown_endpoint(self):
        error = UnknownEndpointError('cat.nope')
        assert str(error) == "Unknown endpoint 'cat.nope'"
        assert isinstance(error, LookupError)


class TestSpecErrors:
    """Tests for descriptor loading errors."""

    def test_load_error(self):
        error = SpecLoadError('api/search.json', cause=ValueError('bad json'))
        assert isinstance(error, SpecError)
        assert str(error) == "Failed to load API spec from 'api/search.json': bad json"

    def test_validation_error(self):
        error = SpecValidationError('search', ['no paths declared', 'x'])
        assert error.errors == ['no paths declared', 'x']
        assert str(error) == (
            "API spec validation failed for 'search': no paths declared; x"
        )

    def test_validation_error_without_details(self):
        error = SpecValidationError('search')
        assert error.errors == []


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_full_message(self):
        error = ConfigurationError('Invalid value', config_path='esapi.yaml', field='timeout')
        assert str(error) == "Invalid value in 'esapi.yaml' (field: timeout)"
        assert error.config_path == 'esapi.yaml'
        assert error.field == 'timeout'
