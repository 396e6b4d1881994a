"""FastAPI application entry point.

This module initialises the FastAPI app, configures logging and
registers the relay routes.  The ``uvicorn`` ASGI server can point to
``chat_relay.main:app`` to serve the application, or run
``chat-relay`` which calls :func:`run`.
"""

from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .utils.logger import setup_logging
from .config.app_config import get_app_config
from .controllers.relay_controller import router as relay_router

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer unknown paths, and unsupported methods on known ones, with 404."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application."""
    setup_logging()
    app_config = get_app_config()

    # No generated docs: every path outside the relay routes answers 404
    app = FastAPI(
        title="Chat Relay",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next) -> Response:
        """Attach the fixed CORS policy to every response."""
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    app.include_router(relay_router)

    @app.get("/", include_in_schema=False)
    @app.get("/index.html", include_in_schema=False)
    async def index() -> Response:
        """Serve the browser UI."""
        index_file = Path(app_config.index_file)
        if not index_file.is_file():
            logger.warning("UI file {} not found", index_file)
            return PlainTextResponse(
                "index.html not found. Ensure it is in the same directory.",
                status_code=404,
            )
        return FileResponse(index_file, media_type="text/html")

    @app.options("/{path:path}", include_in_schema=False)
    async def preflight(path: str) -> Response:
        """Answer every OPTIONS request, including browser preflights."""
        return PlainTextResponse("ok", headers=CORS_HEADERS)

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        logger.debug("Health check invoked")
        return {"status": "ok"}

    return app


# Create an application instance for ASGI servers
app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    app_config = get_app_config()
    logger.info("Starting chat relay on http://{}:{}", app_config.app_host, app_config.app_port)
    uvicorn.run(app, host=app_config.app_host, port=app_config.app_port, log_config=None)


if __name__ == "__main__":
    run()
