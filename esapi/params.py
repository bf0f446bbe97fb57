"""Parameter kinds and their wire formatting.

Every path part and query parameter of an endpoint has a kind. The kind decides
when a value counts as unset (and is left out of the request) and how a set
value is rendered into the string that goes on the wire.
"""

import keyword
from collections.abc import Iterable
from datetime import timedelta
from enum import Enum
from typing import Any

from esapi.exceptions import ParameterValueError

__all__ = [
    'ParamKind',
    'format_duration',
    'format_value',
    'parse_cli_value',
    'python_name',
]

# Wire names whose keyword argument is not simply the wire name.
_RENAMES = {
    'q': 'query',
}

_PART_RENAMES = {
    'type': 'doc_type',
}

_NANOS_PER_MILLI = 1_000_000

# Keyword arguments the executor consumes itself.
_RESERVED = ('body', 'headers', 'context')


class ParamKind(str, Enum):
    STRING = 'string'
    LIST = 'list'
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    DURATION = 'duration'
    ANY = 'any'

    @classmethod
    def from_spec_type(cls, type_name: str | None) -> 'ParamKind':
        """Map a type name from a REST API spec file onto a kind."""
        return _SPEC_TYPES.get((type_name or 'string').lower(), cls.ANY)


_SPEC_TYPES = {
    'string': ParamKind.STRING,
    'enum': ParamKind.STRING,
    'list': ParamKind.LIST,
    'boolean': ParamKind.BOOLEAN,
    'number': ParamKind.INTEGER,
    'int': ParamKind.INTEGER,
    'integer': ParamKind.INTEGER,
    'long': ParamKind.INTEGER,
    'time': ParamKind.DURATION,
    'duration': ParamKind.DURATION,
    'any': ParamKind.ANY,
}


def format_duration(value: timedelta) -> str:
    """Render a duration the way the server expects it.

    Durations shorter than a millisecond are sent in nanoseconds, everything
    else in whole milliseconds.

    >>> format_duration(timedelta(seconds=1, microseconds=500))
    '1000ms'
    >>> format_duration(timedelta(microseconds=250))
    '250000nanos'
    """
    nanos = (
        (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    ) * 1_000
    if nanos < _NANOS_PER_MILLI:
        return f'{nanos}nanos'
    return f'{nanos // _NANOS_PER_MILLI}ms'


def _format_bool(value: bool) -> str:
    return 'true' if value else 'false'


def _join(name: str, value: Any) -> str | None:
    if isinstance(value, (str, bytes)):
        items = [value.decode() if isinstance(value, bytes) else value]
    elif isinstance(value, Iterable):
        items = [str(v) for v in value]
    else:
        raise ParameterValueError(name, ParamKind.LIST.value, value)
    if not items:
        return None
    return ','.join(items)


def format_value(kind: ParamKind, value: Any, name: str = '') -> str | None:
    """Render ``value`` for the wire, or return None when it is unset.

    Args:
        kind: The declared kind of the parameter.
        value: The value supplied by the caller.
        name: Wire name of the parameter, used in error messages.

    Returns:
        The wire string, or None if the parameter must be left out.

    Raises:
        ParameterValueError: If the value cannot be rendered for the kind.
    """
    if value is None:
        return None

    if kind is ParamKind.STRING:
        if isinstance(value, bool):
            return _format_bool(value)
        text = str(value)
        return text or None

    if kind is ParamKind.LIST:
        return _join(name, value)

    if kind is ParamKind.BOOLEAN:
        if isinstance(value, str):
            if value.lower() not in ('true', 'false'):
                raise ParameterValueError(name, kind.value, value)
            return value.lower()
        return _format_bool(bool(value))

    if kind is ParamKind.INTEGER:
        if isinstance(value, bool):
            raise ParameterValueError(name, kind.value, value)
        try:
            return str(int(value))
        except (TypeError, ValueError) as e:
            raise ParameterValueError(name, kind.value, value) from e

    if kind is ParamKind.DURATION:
        if isinstance(value, timedelta):
            if not value:
                return None
            return format_duration(value)
        text = str(value)
        return text or None

    if isinstance(value, bool):
        return _format_bool(value)
    return str(value)


def parse_cli_value(kind: ParamKind, text: str) -> Any:
    """Convert command line text into a value for ``kind``."""
    if kind is ParamKind.LIST:
        return [item for item in text.split(',') if item]
    if kind is ParamKind.BOOLEAN:
        lowered = text.lower()
        if lowered in ('true', '1', 'yes', ''):
            return True
        if lowered in ('false', '0', 'no'):
            return False
        raise ParameterValueError('', kind.value, text)
    if kind is ParamKind.INTEGER:
        try:
            return int(text)
        except ValueError as e:
            raise ParameterValueError('', kind.value, text) from e
    return text


def python_name(wire_name: str, part: bool = False) -> str:
    """Return the keyword argument name for a wire name.

    >>> python_name('_source_includes')
    'source_includes'
    >>> python_name('from')
    'from_'
    """
    renames = _PART_RENAMES if part else _RENAMES
    name = renames.get(wire_name, wire_name.lstrip('_'))
    name = name.replace('-', '_').replace('.', '_')
    if keyword.iskeyword(name) or name in _RESERVED:
        return f'{name}_'
    return name
