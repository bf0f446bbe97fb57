"""Endpoint descriptors and the generic request executor.

An :class:`Endpoint` is a declarative description of one REST operation:
its URL templates, path parts, query parameters and body. The same object
turns call arguments into a :class:`~esapi.request.Request`, hands it to a
transport and wraps whatever comes back.

Key rules:
    - A path part is required when it occurs in every URL template. Required
      parts, in template order, are the positional arguments, followed by the
      body when the endpoint requires one.
    - Empty required values are not rejected; they render as empty segments.
    - Query parameters are only sent when set, and the query string is sorted
      by key.
    - A body always comes with ``Content-Type: application/json``.
"""

import json
import re
from collections.abc import Iterable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from esapi.exceptions import (
    MissingParameterError,
    SpecValidationError,
    UnsupportedParameterError,
)
from esapi.params import ParamKind, format_value, python_name
from esapi.request import (
    CONTENT_TYPE_JSON,
    HEADER_CONTENT_TYPE,
    AsyncResponse,
    Context,
    Request,
    Response,
)

__all__ = ['Body', 'Endpoint', 'ENVELOPE_PARAMS', 'Param', 'Part', 'PathVariant']

HTTP_METHODS = ('GET', 'HEAD', 'POST', 'PUT', 'DELETE')

# Query flags accepted by every endpoint.
ENVELOPE_PARAMS = ('pretty', 'human', 'error_trace', 'filter_path')
_EXECUTOR_KEYWORDS = frozenset((*ENVELOPE_PARAMS, 'body', 'headers', 'context'))

_PLACEHOLDER = re.compile(r'\{(\w+)\}')


class Part(BaseModel):
    """A path parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ParamKind = ParamKind.STRING
    required: bool = False
    description: str | None = None

    @property
    def python_name(self) -> str:
        return python_name(self.name, part=True)


class Param(BaseModel):
    """An optional query string parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ParamKind = ParamKind.STRING
    description: str | None = None

    @property
    def python_name(self) -> str:
        return python_name(self.name)


class Body(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: bool = False
    serialize: str | None = None
    description: str | None = None


class PathVariant(BaseModel):
    """One URL template together with the methods it accepts."""

    model_config = ConfigDict(frozen=True)

    path: str
    methods: tuple[str, ...]

    @property
    def parts(self) -> tuple[str, ...]:
        return tuple(_PLACEHOLDER.findall(self.path))

    @property
    def segments(self) -> list[str]:
        return [s for s in self.path.split('/') if s]

    def render(self, values: Mapping[str, str | None], required: set[str]) -> str:
        """Fill the template, dropping segments of unset optional parts."""
        rendered = []
        for segment in self.segments:
            names = _PLACEHOLDER.findall(segment)
            if any(not values.get(n) and n not in required for n in names):
                continue
            rendered.append(
                _PLACEHOLDER.sub(lambda m: values.get(m.group(1)) or '', segment)
            )
        return '/' + '/'.join(rendered)


class Endpoint(BaseModel):
    """Descriptor of one REST operation.

    Example:
        >>> count = registry.get('count')
        >>> request = count.build_request(index='logs-2024', pretty=True)
        >>> request.method, request.path, request.query
        ('GET', '/logs-2024/_count', 'pretty=true')
    """

    model_config = ConfigDict(frozen=True)

    name: str
    documentation: str | None = None
    paths: tuple[PathVariant, ...]
    parts: dict[str, Part] = Field(default_factory=dict)
    params: dict[str, Param] = Field(default_factory=dict)
    body: Body | None = None

    @property
    def namespace(self) -> str | None:
        namespace, _, _ = self.name.rpartition('.')
        return namespace or None

    @property
    def short_name(self) -> str:
        return self.name.rpartition('.')[2]

    @property
    def method(self) -> str:
        """Method of the most specific URL template."""
        return self.longest_path.methods[0]

    @property
    def longest_path(self) -> PathVariant:
        return max(self.paths, key=lambda v: len(v.parts))

    @property
    def required_parts(self) -> list[Part]:
        return [
            self.parts[name]
            for name in self.longest_path.parts
            if name in self.parts and self.parts[name].required
        ]

    @property
    def positional_names(self) -> list[str]:
        names = [part.python_name for part in self.required_parts]
        if self.body is not None and self.body.required:
            names.append('body')
        return names

    def option(self, name: str) -> Part | Param | None:
        """Find a part or param by keyword name, falling back to the wire name."""
        items = [*self.parts.values(), *self.params.values()]
        for item in items:
            if item.python_name == name:
                return item
        for item in items:
            if item.name == name:
                return item
        return None

    def signature(self) -> str:
        args = list(self.positional_names)
        optional = [p.python_name for p in self.parts.values() if not p.required]
        if self.body is not None and not self.body.required:
            optional.append('body')
        optional += [p.python_name for p in self.params.values()]
        optional += [*ENVELOPE_PARAMS, 'headers', 'context']
        if optional:
            args.append('*')
            args += [f'{name}=None' for name in optional]
        return f'{self.name}({", ".join(args)})'

    def build_request(self, *args: Any, **options: Any) -> Request:
        """Turn call arguments into a :class:`Request` without any I/O.

        Args:
            *args: Required path parts in template order, then the body if
                the endpoint requires one.
            **options: Path parts, query parameters, ``body`` and the envelope
                options ``pretty``, ``human``, ``error_trace``,
                ``filter_path``, ``headers`` and ``context``.

        Raises:
            UnsupportedParameterError: For unknown options or too many
                positional arguments.
            MissingParameterError: When a required argument is absent.
            ParameterValueError: When a value does not fit its kind.
        """
        positional = self.positional_names
        if len(args) > len(positional):
            raise UnsupportedParameterError(
                self.name,
                '*args',
                reason=f'takes {len(positional)} positional arguments '
                f'but {len(args)} were given',
            )
        values: dict[str, Any] = {}
        for key, value in options.items():
            option = None if key in _EXECUTOR_KEYWORDS else self.option(key)
            name = key if option is None else option.python_name
            if name in values:
                raise UnsupportedParameterError(
                    self.name, name, reason=f"got multiple values for '{name}'"
                )
            values[name] = value
        for name, value in zip(positional, args):
            if name in values:
                raise UnsupportedParameterError(
                    self.name, name, reason=f"got multiple values for '{name}'"
                )
            values[name] = value
        for name in positional:
            if name not in values:
                raise MissingParameterError(self.name, name)

        body = values.pop('body', None)
        if body is not None and self.body is None:
            raise UnsupportedParameterError(self.name, 'body')
        headers = values.pop('headers', None)
        context: Context | None = values.pop('context', None)
        envelope = {name: values.pop(name, None) for name in ENVELOPE_PARAMS}

        part_values: dict[str, str | None] = {}
        params: list[tuple[str, str]] = []
        for name, value in values.items():
            option = self.option(name)
            if option is None:
                raise UnsupportedParameterError(self.name, name)
            formatted = format_value(option.kind, value, option.name)
            if isinstance(option, Part):
                part_values[option.name] = formatted
            elif formatted is not None:
                params.append((option.name, formatted))

        for flag in ('pretty', 'human', 'error_trace'):
            if envelope[flag]:
                params.append((flag, 'true'))
        filter_path = format_value(
            ParamKind.LIST, envelope['filter_path'], 'filter_path'
        )
        if filter_path is not None:
            params.append(('filter_path', filter_path))

        variant, path = self._build_path(part_values)
        encoded_body = self._encode_body(body)

        request_headers: list[tuple[str, str]] = []
        if encoded_body is not None:
            request_headers.append((HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON))
        request_headers.extend(_header_items(headers))

        return Request(
            method=variant.methods[0],
            path=path,
            params=sorted(params, key=lambda item: item[0]),
            headers=request_headers,
            body=encoded_body,
            context=context,
        )

    def perform(self, transport, *args: Any, **options: Any) -> Response:
        """Build the request, send it once through ``transport``, wrap the result.

        Transport exceptions propagate unchanged and error statuses are
        returned as ordinary responses.
        """
        request = self.build_request(*args, **options)
        return Response.from_httpx(transport.perform(request))

    async def perform_async(self, transport, *args: Any, **options: Any) -> AsyncResponse:
        request = self.build_request(*args, **options)
        return AsyncResponse.from_httpx(await transport.perform(request))

    def _build_path(
        self, part_values: Mapping[str, str | None]
    ) -> tuple[PathVariant, str]:
        required = {part.name for part in self.parts.values() if part.required}
        provided = required | {n for n, v in part_values.items() if v}
        for variant in self.paths:
            if set(variant.parts) == provided:
                return variant, variant.render(part_values, required)
        variant = self.longest_path
        return variant, variant.render(part_values, required)

    def _encode_body(self, body: Any) -> Any:
        if body is None:
            return None
        if isinstance(body, (bytes, bytearray, str)):
            return body
        if self.body is not None and self.body.serialize == 'bulk':
            if isinstance(body, (list, tuple)):
                lines = [
                    item if isinstance(item, str) else json.dumps(item)
                    for item in body
                ]
                return ''.join(f'{line}\n' for line in lines)
        if isinstance(body, (Mapping, list, tuple)):
            return json.dumps(body)
        # file objects and byte iterators are streamed by the transport
        return body

    @classmethod
    def from_spec(cls, name: str, spec: Mapping[str, Any]) -> 'Endpoint':
        """Build an endpoint from a REST API spec entry.

        Both the layout with ``url.paths`` as a list of objects carrying
        their own ``methods`` and ``parts``, and the older layout with
        top-level ``methods`` and ``url.path``/``url.paths`` strings are
        understood. Parameter types may be given in shorthand
        (``'boolean'`` instead of ``{'type': 'boolean'}``).

        Raises:
            SpecValidationError: If the entry cannot describe an endpoint.
        """
        errors: list[str] = []
        if not isinstance(spec, Mapping):
            raise SpecValidationError(name, ['entry must be a mapping'])

        url = spec.get('url') or {}
        top_methods = [m.upper() for m in spec.get('methods') or []]
        declared_parts: dict[str, Any] = dict(url.get('parts') or {})

        raw_paths = list(url.get('paths') or [])
        if not raw_paths and url.get('path'):
            raw_paths = [url['path']]

        variants = []
        for raw in raw_paths:
            if isinstance(raw, str):
                path, methods = raw, top_methods
            else:
                path = raw.get('path', '')
                methods = [m.upper() for m in raw.get('methods') or top_methods]
                declared_parts.update(raw.get('parts') or {})
            if not path.startswith('/'):
                errors.append(f"path '{path}' must start with '/'")
                continue
            if not methods:
                errors.append(f"path '{path}' has no methods")
                continue
            unknown = [m for m in methods if m not in HTTP_METHODS]
            if unknown:
                errors.append(f"path '{path}' has unsupported methods {unknown}")
                continue
            variants.append(PathVariant(path=path, methods=tuple(methods)))

        if not raw_paths:
            errors.append('no paths declared')
        if errors:
            raise SpecValidationError(name, errors)

        parts = {}
        names_in_order = []
        for variant in variants:
            names_in_order += [n for n in variant.parts if n not in names_in_order]
        for part_name in names_in_order:
            kind, description = _kind_and_description(declared_parts.get(part_name))
            parts[part_name] = Part(
                name=part_name,
                kind=ParamKind.LIST if kind is ParamKind.LIST else ParamKind.STRING,
                required=all(part_name in v.parts for v in variants),
                description=description,
            )

        params = {}
        raw_params = spec.get('params') or url.get('params') or {}
        for param_name, raw in raw_params.items():
            if param_name in ENVELOPE_PARAMS or param_name in parts:
                continue
            kind, description = _kind_and_description(raw)
            params[param_name] = Param(
                name=param_name, kind=kind, description=description
            )

        body = None
        raw_body = spec.get('body')
        if raw_body is not None:
            body = Body(
                required=bool(raw_body.get('required', False)),
                serialize=raw_body.get('serialize'),
                description=raw_body.get('description'),
            )

        documentation = spec.get('documentation')
        if isinstance(documentation, Mapping):
            documentation = documentation.get('url')

        return cls(
            name=name,
            documentation=documentation,
            paths=tuple(variants),
            parts=parts,
            params=params,
            body=body,
        )


def _kind_and_description(raw: Any) -> tuple[ParamKind, str | None]:
    if raw is None:
        return ParamKind.STRING, None
    if isinstance(raw, str):
        return ParamKind.from_spec_type(raw), None
    return ParamKind.from_spec_type(raw.get('type')), raw.get('description')


def _header_items(headers: Any) -> list[tuple[str, str]]:
    """Flatten caller headers into pairs, keeping every value."""
    if not headers:
        return []
    if isinstance(headers, httpx.Headers):
        return list(headers.multi_items())
    items = headers.items() if isinstance(headers, Mapping) else headers
    pairs = []
    for key, value in items:
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            pairs += [(key, str(v)) for v in value]
        else:
            pairs.append((key, str(value)))
    return pairs
