"""
Main FastAPI application for the Vehicle Shop backend
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import require_database_url, settings
from ..database import (
    check_database_connection,
    create_engine_from_url,
    create_session_factory,
    create_tables,
)
from ..jokes import JokeClient
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Opens the database engine and the joke API client, publishes them on
    ``app.state`` for the GraphQL context, and closes both on shutdown.
    """
    # Startup
    logger.info("Starting Vehicle Shop API...")
    database_url = require_database_url()

    engine = create_engine_from_url(database_url)
    ok, error = await check_database_connection(engine)
    if not ok:
        logger.error("Database connection failed", error=error)
        await engine.dispose()
        raise RuntimeError(error)

    await create_tables(engine)
    logger.info("Connected to database")

    app.state.session_factory = create_session_factory(engine)

    async with httpx.AsyncClient(timeout=settings.joke_api_timeout) as http_client:
        app.state.joke_client = JokeClient(http_client, settings.joke_api_url)
        logger.info("Server ready", graphql_endpoint="/graphql")

        yield

    # Shutdown
    logger.info("Shutting down Vehicle Shop API...")
    await engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Vehicle Shop API",
        description="GraphQL API for vehicles and their parts",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Validate schema at startup to catch unresolved types early
        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "vehicleshop.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
