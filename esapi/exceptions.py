"""Custom exceptions for esapi.

This module defines the exceptions raised by the request layer. Status codes
returned by the server are never turned into exceptions here; a 404 or a 500
is an ordinary :class:`esapi.request.Response`.
"""


class ESAPIError(Exception):
    """Base exception for all esapi errors.

    Example:
        try:
            api.search(index='logs-*')
        except ESAPIError as e:
            print(f"esapi error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class TransportError(ESAPIError):
    """The request never produced a response.

    Raised by the bundled transports for connection refused, DNS failures,
    timeouts before a response arrives and similar network level problems.

    Attributes:
        url: The URL that was being requested.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        self.cause = cause
        message = f"Failed to perform request to '{url}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ContextError(ESAPIError):
    """Base exception for a request whose context is done."""

    pass


class RequestCancelledError(ContextError):
    """The request context was cancelled before the response arrived."""

    def __init__(self, message: str = 'context cancelled'):
        super().__init__(message)


class DeadlineExceededError(ContextError):
    """The request context deadline passed before the response arrived."""

    def __init__(self, message: str = 'context deadline exceeded'):
        super().__init__(message)


class UnknownEndpointError(ESAPIError, LookupError):
    """No endpoint with the given name is registered.

    Attributes:
        name: The dotted endpoint name that was looked up.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown endpoint '{name}'")


class UnsupportedParameterError(ESAPIError, TypeError):
    """An option was passed that the endpoint does not declare.

    Attributes:
        endpoint: The endpoint name.
        parameter: The offending keyword argument.
    """

    def __init__(self, endpoint: str, parameter: str, reason: str | None = None):
        self.endpoint = endpoint
        self.parameter = parameter
        message = f"{endpoint}() got an unexpected parameter '{parameter}'"
        if reason:
            message = f'{endpoint}(): {reason}'
        super().__init__(message)


class MissingParameterError(ESAPIError, TypeError):
    """A required positional argument of an endpoint was not supplied.

    Only absence is reported; an empty value is passed through to the path.

    Attributes:
        endpoint: The endpoint name.
        parameter: The missing argument.
    """

    def __init__(self, endpoint: str, parameter: str):
        self.endpoint = endpoint
        self.parameter = parameter
        super().__init__(
            f"{endpoint}() missing required argument '{parameter}'"
        )


class ParameterValueError(ESAPIError, ValueError):
    """A parameter value cannot be rendered for its declared kind.

    Attributes:
        parameter: The wire name of the parameter.
        kind: The declared kind of the parameter.
        value: The rejected value.
    """

    def __init__(self, parameter: str, kind: str, value: object):
        self.parameter = parameter
        self.kind = kind
        self.value = value
        super().__init__(
            f"Invalid value {value!r} for {kind} parameter '{parameter}'"
        )


class SpecError(ESAPIError):
    """Base exception for endpoint descriptor errors."""

    pass


class SpecLoadError(SpecError):
    """Failed to load endpoint descriptors from a source.

    Attributes:
        source: The file or directory that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load API spec from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class SpecValidationError(SpecError):
    """An endpoint descriptor is malformed.

    Attributes:
        source: The endpoint name or file of the invalid descriptor.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"API spec validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ConfigurationError(ESAPIError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)
