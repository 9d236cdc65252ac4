"""Ping - FastAPI application.

Answers GET / with whatever the helloworld service says.
"""

import logging
from contextlib import asynccontextmanager

import httpx
import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from . import config, proxy

# Only ships to Logfire when LOGFIRE_TOKEN is set; console output either way
logfire.configure(service_name="ping", send_to_logfire="if-token-present", scrubbing=False)
logging.basicConfig(level=config.LOG_LEVEL, handlers=[logfire.LogfireLoggingHandler()])
logger = logging.getLogger(__name__)


def create_app(client: httpx.AsyncClient | None = None) -> FastAPI:
    """Build the app around an upstream client.

    Pass `client` to share one you own; otherwise the app makes its own at
    startup and closes it at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage the upstream client's lifecycle."""
        logfire.info("Ping is starting up...")
        app.state.upstream = client if client is not None else proxy.create_client()
        yield
        logfire.info("Ping is shutting down...")
        if client is None:
            await app.state.upstream.aclose()

    app = FastAPI(
        title="Ping",
        description="Relays the helloworld service.",
        lifespan=lifespan,
    )

    @app.exception_handler(proxy.UpstreamError)
    async def upstream_error(request: Request, exc: proxy.UpstreamError):
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.get("/", response_class=PlainTextResponse)
    async def index(request: Request):
        """Return the upstream body verbatim. Upstream headers are dropped."""
        body = await proxy.fetch_upstream_body(request.app.state.upstream)
        return PlainTextResponse(body)

    return app


app = create_app()
