"""Test request, response and context value types."""

import asyncio
import threading
import time

import httpx
import pytest

from esapi.exceptions import (
    ContextError,
    DeadlineExceededError,
    RequestCancelledError,
)
from esapi.request import AsyncResponse, Context, Request, Response


class TestRequest:
    """Test the Request dataclass."""

    def test_url_without_query(self):
        request = Request('GET', '/logs/_count')
        assert request.url == '/logs/_count'

    def test_url_with_query(self):
        request = Request('GET', '/_search', params=[('q', 'error'), ('size', '1')])
        assert request.url == '/_search?q=error&size=1'

    def test_url_keeps_commas_and_wildcards(self):
        request = Request('GET', '/logs-*,metrics/_search')
        assert request.url == '/logs-*,metrics/_search'

    def test_url_escapes_unsafe_characters(self):
        request = Request('GET', '/my index/_doc/a#b')
        assert request.url == '/my%20index/_doc/a%23b'

    def test_header_values_case_insensitive(self):
        request = Request(
            'GET', '/', headers=[('X-Trace', '1'), ('x-trace', '2'), ('Other', '3')]
        )
        assert request.header_values('X-TRACE') == ['1', '2']


class TestResponse:
    """Test the Response wrapper."""

    def _response(self, status_code=200, content=b'{"ok": true}', headers=None):
        return Response.from_httpx(
            httpx.Response(status_code, content=content, headers=headers)
        )

    def test_read_json(self):
        assert self._response().json() == {'ok': True}

    def test_empty_body_json(self):
        assert self._response(content=b'').json() is None

    def test_text(self):
        assert self._response(content=b'green').text() == 'green'

    @pytest.mark.parametrize(
        'status_code,is_error',
        [(200, False), (201, False), (299, False), (300, True), (404, True), (500, True)],
    )
    def test_is_error(self, status_code, is_error):
        assert self._response(status_code).is_error() is is_error

    def test_warnings(self):
        response = self._response(
            headers=[('Warning', '299 Elasticsearch "deprecated"'), ('Warning', 'again')]
        )
        assert response.has_warnings()
        assert response.warnings() == ['299 Elasticsearch "deprecated"', 'again']

    def test_no_warnings(self):
        assert not self._response().has_warnings()

    def test_str(self):
        assert str(self._response(content=b'{}')) == '[200 OK] {}'

    def test_str_unknown_status(self):
        assert str(self._response(599, content=b'')) == '[599] '

    def test_read_closes_body(self):
        closed = []
        response = Response(
            200, httpx.Headers(), iter([b'a', b'b']), _close=lambda: closed.append(True)
        )
        assert response.read() == b'ab'
        assert closed == [True]

    def test_context_manager_closes(self):
        closed = []
        with Response(200, httpx.Headers(), iter([]), _close=lambda: closed.append(1)):
            pass
        assert closed == [1]


class TestAsyncResponse:
    """Test the AsyncResponse wrapper."""

    def test_json(self):
        response = AsyncResponse.from_httpx(httpx.Response(200, content=b'[1, 2]'))
        assert asyncio.run(response.json()) == [1, 2]

    def test_text(self):
        response = AsyncResponse.from_httpx(httpx.Response(404, content=b'missing'))
        assert str(response) == '[404 Not Found]'
        assert asyncio.run(response.text()) == 'missing'

    def test_async_context_manager(self):
        closed = []

        async def close():
            closed.append(True)

        async def chunks():
            yield b'x'

        async def run():
            async with AsyncResponse(200, httpx.Headers(), chunks(), _close=close) as r:
                return r.is_error()

        assert asyncio.run(run()) is False
        assert closed == [True]


class TestContext:
    """Test the cancellation context."""

    def test_fresh_context(self):
        context = Context()
        assert not context.done
        assert context.remaining() is None
        context.check()

    def test_cancel(self):
        context = Context()
        context.cancel()
        assert context.cancelled
        with pytest.raises(RequestCancelledError) as exc_info:
            context.check()
        assert isinstance(exc_info.value, ContextError)
        assert str(exc_info.value) == 'context cancelled'

    def test_expired_deadline(self):
        context = Context(deadline=time.monotonic() - 1)
        assert context.expired
        assert context.remaining() == 0.0
        with pytest.raises(DeadlineExceededError):
            context.check()

    def test_timeout_sets_deadline(self):
        context = Context(timeout=60)
        assert 59 < context.remaining() <= 60
        assert not context.done

    def test_cancel_from_other_thread(self):
        context = Context()
        timer = threading.Timer(0.01, context.cancel)
        timer.start()
        assert context.wait(timeout=5)
        timer.join()
