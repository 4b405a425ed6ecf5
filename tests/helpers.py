"""Shared test doubles and a live target server."""

import asyncio

from aiohttp import web
from aiohttp.test_utils import TestServer

from httpbench.core.models import RequestOutcome


class FakeExecutor:
    """Records every descriptor and answers with a fixed outcome."""

    def __init__(self, status_code=200, byte_length=10, delay=0.0):
        self.status_code = status_code
        self.byte_length = byte_length
        self.delay = delay
        self.calls = []

    async def execute(self, descriptor):
        self.calls.append(descriptor)
        await asyncio.sleep(self.delay)
        return RequestOutcome(
            latency=self.delay,
            status_code=self.status_code,
            byte_length=self.byte_length,
        )


def make_app(hits):
    """Small target app; every request is appended to hits."""

    async def ok(request):
        hits.append((request.method, request.path_qs, await request.text(),
                     request.headers.get("Content-Type")))
        return web.Response(text="hello")

    async def slow(request):
        hits.append((request.method, request.path_qs, None, None))
        await asyncio.sleep(0.5)
        return web.Response(text="late")

    async def missing(request):
        hits.append((request.method, request.path_qs, None, None))
        return web.Response(status=404, text="nope")

    app = web.Application()
    app.router.add_route("*", "/slow", slow)
    app.router.add_route("*", "/missing", missing)
    app.router.add_route("*", "/{tail:.*}", ok)
    return app


async def serve(hits, coro_fn):
    """Run coro_fn(server) against a live target server."""
    server = TestServer(make_app(hits))
    await server.start_server()
    try:
        return await coro_fn(server)
    finally:
        await server.close()
