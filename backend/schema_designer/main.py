"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schema_designer import __version__
from schema_designer.api.errors import register_exception_handlers
from schema_designer.api.routes import chat, projects, status
from schema_designer.core.config import Settings, settings as default_settings
from schema_designer.core.llm import create_llm_provider
from schema_designer.core.logging import configure_logging
from schema_designer.core.storage import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the store and model clients on startup, release them on shutdown."""
    app_settings: Settings = app.state.settings

    missing = app_settings.missing_required()
    if missing:
        logger.error("The following required environment variables are missing:")
        for name in missing:
            logger.error("- %s", name)
        logger.error("Please set these variables in your .env file")

    database = None
    if app_settings.database_url:
        database = Database(app_settings.database_url, echo=app_settings.database_echo)
        await database.connect()
    app.state.database = database

    app.state.llm_provider = create_llm_provider(app_settings)
    if app.state.llm_provider is not None:
        logger.info(
            "LLM client initialized (%s/%s)", app_settings.llm_provider, app_settings.llm_model
        )

    logger.info("API key: %s", "Configured" if app_settings.gemini_api_key else "Missing")
    logger.info("Database URL: %s", "Configured" if app_settings.database_url else "Missing")
    logger.info(
        "Database connection: %s",
        "Successful" if database is not None and database.is_connected else "Failed",
    )

    yield

    if database is not None:
        logger.info("Closing database connections...")
        await database.close()
    logger.info("Application shutdown complete")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application."""
    app_settings = app_settings or default_settings
    configure_logging(app_settings.log_level)

    app = FastAPI(
        title="Schema Designer Backend",
        description="Conversational MongoDB schema design API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(chat.router, prefix="/api")
    app.include_router(projects.router, prefix="/api")
    app.include_router(status.router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Schema Designer Backend",
            "version": __version__,
            "status": "running",
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "schema_designer.main:app",
        host=default_settings.host,
        port=default_settings.port,
    )
