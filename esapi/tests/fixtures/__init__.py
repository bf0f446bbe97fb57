"""Test fixtures for esapi tests.

This module provides sample REST API spec entries and stub transports that
echo the request they receive, so tests can assert on the exact method, path,
query, headers and body an endpoint produced.
"""

import json

import httpx

# Entry in the layout used by REST API spec files since 7.x
DEMO_SPEC = {
    'demo.get': {
        'documentation': {
            'url': 'https://example.com/docs/demo-get.html',
            'description': 'Fetch a demo document',
        },
        'stability': 'stable',
        'url': {
            'paths': [
                {
                    'path': '/{index}/_demo/{id}',
                    'methods': ['GET'],
                    'parts': {
                        'index': {'type': 'string', 'description': 'Index name'},
                        'id': {'type': 'string', 'description': 'Document id'},
                    },
                }
            ]
        },
        'params': {
            'realtime': {'type': 'boolean', 'description': 'Realtime lookup'},
            'routing': {'type': 'string'},
            'timeout': {'type': 'time'},
        },
    }
}

# Entry in the older layout with top-level methods and path strings
LEGACY_SPEC = {
    'demo.search': {
        'documentation': 'https://example.com/docs/demo-search.html',
        'methods': ['get', 'post'],
        'url': {
            'path': '/_demo/_search',
            'paths': ['/_demo/_search', '/{index}/_demo/_search'],
            'parts': {'index': {'type': 'list'}},
            'params': {
                'size': {'type': 'number'},
                'pretty': {'type': 'boolean'},
            },
        },
        'body': {'description': 'The search definition'},
    }
}

COMMON_SPEC = {
    '_common': {
        'params': {
            'pretty': {'type': 'boolean'},
            'human': {'type': 'boolean'},
        }
    }
}


def echo_payload(request: httpx.Request) -> dict:
    return {
        'method': request.method,
        'path': request.url.path,
        'query': request.url.query.decode(),
        'headers': [[k, v] for k, v in request.headers.multi_items()],
        'body': request.content.decode() or None,
    }


def echo_handler(request: httpx.Request) -> httpx.Response:
    """httpx.MockTransport handler answering with a description of the request."""
    return httpx.Response(200, json=echo_payload(request))


class EchoTransport:
    """Transport stub returning the esapi request it was given as JSON."""

    def __init__(self, status_code: int = 200, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self.requests = []

    def perform(self, request):
        self.requests.append(request)
        body = request.body
        if isinstance(body, bytes):
            body = body.decode()
        payload = {
            'method': request.method,
            'path': request.path,
            'query': request.query,
            'headers': [list(pair) for pair in request.headers],
            'body': body,
        }
        return httpx.Response(
            self.status_code, headers=self.headers, content=json.dumps(payload)
        )


class AsyncEchoTransport(EchoTransport):
    async def perform(self, request):
        return super().perform(request)
