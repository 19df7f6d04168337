"""
FastAPI application entrypoint.

Creates and configures the FastAPI application with:
  - Lifespan management (logging setup)
  - API router registration
  - CORS middleware
  - Custom exception handlers
  - Health check endpoint
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from urlbuildr.api.routes import router as urls_router
from urlbuildr.core.lifespan import lifespan
from urlbuildr.core.exceptions import InvalidArgumentShape, UrlBuilderError


def create_app() -> FastAPI:
    """Application factory — creates and configures the FastAPI instance."""

    application = FastAPI(
        title="URL Builder Service",
        description=(
            "Assembles URLs from a declared structure: prefix, host, port, "
            "path prefix, path segments with ':name' placeholders, and "
            "query parameters."
        ),
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ────────────────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Routes ───────────────────────────────────────────────
    application.include_router(urls_router, prefix="/api/v1")

    # ── Health Check ─────────────────────────────────────────
    @application.get(
        "/health",
        tags=["Health"],
        summary="Service health check",
        status_code=status.HTTP_200_OK,
    )
    async def health_check():
        """Return service health status."""
        return {"status": "healthy", "service": "urlbuildr"}

    # ── Exception Handlers ───────────────────────────────────
    @application.exception_handler(InvalidArgumentShape)
    async def invalid_argument_shape_handler(
        request: Request, exc: InvalidArgumentShape
    ):
        """Uninterpretable input is a client error."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.message},
        )

    @application.exception_handler(UrlBuilderError)
    async def url_builder_error_handler(request: Request, exc: UrlBuilderError):
        """Handle all other URL builder exceptions."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message},
        )

    @application.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Catch-all handler to prevent stack traces from leaking to clients."""
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An internal server error occurred."},
        )

    return application


# Create the app instance — referenced by uvicorn as urlbuildr.main:app
app = create_app()
