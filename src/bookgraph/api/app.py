"""
Main FastAPI application for bookgraph
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.tokens import TokenService
from ..config import Settings, settings
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..resolvers.stack import build_resolvers, default_layers
from ..store.base import EntityStore
from ..store.seed_data import create_seeded_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting bookgraph API...", layers=app.state.layer_names)
    yield
    logger.info("Shutting down bookgraph API...")


def create_app(store: EntityStore | None = None, config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The resolver stack is composed here, once, and shared by every request.
    """
    config = config or settings
    store = store or create_seeded_store()

    tokens = TokenService.from_settings(config)
    layers = default_layers(redaction_marker=config.redaction_marker)
    resolvers = build_resolvers(store, tokens, layers)

    app = FastAPI(
        title="bookgraph API",
        description="Authors and books over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=config.debug,
    )
    app.state.resolvers = resolvers
    app.state.layer_names = [layer.name for layer in layers]

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(
            resolvers,
            tokens,
            token_header=config.token_header,
            graphiql=config.graphiql,
        )
        app.include_router(graphql_router, prefix="")
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
        "bookgraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
