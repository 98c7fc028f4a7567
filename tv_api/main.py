import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tv_api.api import channels, health
from tv_api.core.config import Settings, settings as default_settings
from tv_api.core.database import Database
from tv_api.core.errors import DirectoryError, describe_validation_errors, status_for_error

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or default_settings

    # -------------------------
    # FastAPI lifecycle
    # -------------------------
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database.create_all()
        if settings.ENABLE_DOCS:
            logger.info(f"🔎 Swagger UI enabled at {settings.API_BASE_URL}/api-docs")
        logger.info(f"🚀 API running at {settings.API_BASE_URL}/channels")
        yield
        app.state.database.dispose()

    app = FastAPI(
        lifespan=lifespan,
        title="TV API",
        version="1.0.0",
        description="API for managing TV channels",
        servers=[{"url": settings.API_BASE_URL, "description": "Configured API base URL"}],
        docs_url="/api-docs" if settings.ENABLE_DOCS else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.ENABLE_DOCS else None,
    )
    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL)

    # -------------------------
    # CORS
    # -------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------
    # Include Routers
    # -------------------------
    app.include_router(channels.router)
    app.include_router(health.router)

    # -------------------------
    # Error mapping
    # -------------------------
    @app.exception_handler(DirectoryError)
    async def handle_directory_error(request: Request, exc: DirectoryError):
        return JSONResponse(status_code=status_for_error(exc), content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": describe_validation_errors(exc.errors())})

    @app.get("/", include_in_schema=False)
    def root():
        return {"status": "running"}

    return app


app = create_app()


def main():
    import uvicorn

    configure_logging(default_settings.LOG_LEVEL)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    main()
