from __future__ import annotations

import logging
from typing import Callable, Optional

from aiohttp import web
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

log = logging.getLogger(__name__)


def build_app(ready: Optional[Callable[[], bool]] = None) -> web.Application:
    app = web.Application()

    async def _healthz(_request):
        return web.Response(text="ok", content_type="text/plain")

    async def _readyz(_request):
        if ready is not None and not ready():
            return web.Response(status=503, text="starting", content_type="text/plain")
        return web.Response(text="ok", content_type="text/plain")

    async def _metrics(_request):
        data = generate_latest()
        return web.Response(body=data, headers={"Content-Type": CONTENT_TYPE_LATEST})

    app.add_routes([
        web.get("/healthz", _healthz),
        web.get("/readyz", _readyz),
        web.get("/metrics", _metrics),
    ])
    return app


async def start_health_server(port: int, ready: Optional[Callable[[], bool]] = None) -> web.AppRunner:
    runner = web.AppRunner(build_app(ready))
    await runner.setup()
    site = web.TCPSite(runner, host="0.0.0.0", port=port)
    await site.start()
    log.info("Health server listening on :%d", port)
    return runner
