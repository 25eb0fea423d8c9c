"""
Proxy Service - Main Application
Forwards NAVER map and HIRA non-payment lookups with server-side credentials
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.exceptions import GatewayError, UpstreamHttpError
from app.routes import codes, health, hira, naver
from app.services.code_table import DEFAULT_CODES_PATH, load_code_table
from app.utils.logger import configure_logging

logger = structlog.get_logger(__name__)

SERVICE_NAME = "proxy-service"
SERVICE_VERSION = "1.0.0"
PUBLIC_DIR = Path(__file__).resolve().parent / "public"


def create_app(
    settings: Optional[Settings] = None,
    codes_path: Path = DEFAULT_CODES_PATH,
) -> FastAPI:
    """Build the application around one immutable settings object"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info("Starting Proxy Service")
        settings.log_config()

        app.state.http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.upstream_timeout),
            follow_redirects=True,
        )
        logger.info("Upstream HTTP client initialized", timeout=settings.upstream_timeout)

        yield

        await app.state.http_client.aclose()
        logger.info("Proxy Service shutdown complete")

    app = FastAPI(
        title="Proxy Service",
        description="NAVER map geocoding and HIRA non-payment hospital lookup proxy",
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.code_table = load_code_table(codes_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        # Query strings are left out; callers may send location data
        logger.info(
            "Request received",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown"
        )

        response = await call_next(request)

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code
        )

        return response

    @app.exception_handler(UpstreamHttpError)
    async def upstream_http_error_handler(request: Request, exc: UpstreamHttpError):
        """Relay upstream failures untouched"""
        logger.warning(
            "Relaying upstream error",
            path=request.url.path,
            status_code=exc.status_code
        )
        # An explicit header keeps Starlette from appending its own charset
        if exc.content_type:
            return Response(
                content=exc.body,
                status_code=exc.status_code,
                headers={"content-type": exc.content_type},
            )
        return Response(content=exc.body, status_code=exc.status_code, media_type="text/plain")

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        """Configuration, parsing, timeout and internal failures as plain text"""
        logger.error(
            "Request failed",
            error_type=type(exc).__name__,
            error=exc.message,
            path=request.url.path,
            status_code=exc.status_code
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            path=request.url.path,
            exc_info=True
        )
        return PlainTextResponse(f"Error: {exc}", status_code=500)

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(naver.router, prefix="/api", tags=["NAVER"])
    app.include_router(hira.router, prefix="/api/hira", tags=["HIRA"])
    app.include_router(codes.router, prefix="/api", tags=["Codes"])
    app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint"""
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "status": "running",
            "docs": "/docs"
        }

    return app


settings = get_settings()
configure_logging(settings.log_level)
app = create_app(settings)


def run():
    """Console entry point"""
    import uvicorn

    logger.info("Proxy listening", host=settings.host, port=settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
