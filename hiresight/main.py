"""FastAPI application factory with CORS handling, error envelopes, routers, and lifespan."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .careers.dataset import load_job_dataset
from .careers.routes import router as careers_router
from .config import Settings, settings as default_settings, setup_logging
from .errors import ConfigError, HiresightError
from .insights.routes import router as insights_router
from .integrations.fetcher import PageFetcher
from .integrations.provider import create_provider
from .scraper.routes import router as scraper_router

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    setup_logging(app.state.settings)
    app.state.started_at = time.time()
    app.state.job_dataset = load_job_dataset(app.state.settings.job_dataset_path)
    yield


def _init_provider(app: FastAPI, config: Settings) -> None:
    """Build the AI provider once. A missing credential is kept, not raised, so every AI call can report it."""
    app.state.provider = None
    app.state.config_error = ""
    try:
        app.state.provider = create_provider(config)
    except ConfigError as exc:
        app.state.config_error = exc.message
        logger.error("%s; AI routes will answer 500 until it is fixed", exc.message)


def create_app(config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or default_settings

    app = FastAPI(title="Hiresight", version=VERSION, lifespan=lifespan)
    app.state.settings = config
    app.state.started_at = time.time()
    app.state.job_dataset = []
    app.state.fetcher = PageFetcher(
        timeout=config.fetch_timeout_seconds,
        max_bytes=config.fetch_max_bytes,
        content_budget=config.content_budget_chars,
    )
    _init_provider(app, config)

    # --- Exception handlers ---
    @app.exception_handler(HiresightError)
    async def hiresight_error_handler(request: Request, exc: HiresightError):
        if exc.status_code >= 500:
            logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse({"error": f"Invalid request body: {detail}"}, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Unknown error"}, status_code=500, headers=CORS_HEADERS)

    # --- CORS: permissive headers on every response, 204 for pre-flight ---
    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    # --- Routers ---
    app.include_router(insights_router)
    app.include_router(scraper_router)
    app.include_router(careers_router)

    # --- Health check ---
    @app.get("/health")
    def health():
        configured = app.state.provider is not None
        return {
            "status": "ok" if configured else "degraded",
            "provider": config.ai_provider,
            "provider_configured": configured,
            "version": VERSION,
            "uptime_seconds": round(time.time() - app.state.started_at, 1),
        }

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("hiresight.main:app", host="0.0.0.0", port=8000)


app = create_app()
