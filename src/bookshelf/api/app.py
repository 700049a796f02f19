"""
Main FastAPI application for the Bookshelf API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from graphql import GraphQLSchema
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import settings
from ..errors import BookshelfError, TransportError
from ..graphql.pipeline import OperationPipeline
from ..graphql.schema import load_schema
from ..logging import configure_logging, get_logger
from ..middleware import CrossOriginMiddleware, LoggingContextMiddleware
from ..store import DataStore, load_data_store
from .endpoints import graphql as graphql_endpoints
from .otel import setup_opentelemetry

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Bookshelf API ready",
        host=settings.api_host,
        port=settings.api_port,
        store=repr(app.state.store),
    )
    yield
    logger.info("Shutting down Bookshelf API...")


def create_app(
    store: DataStore | None = None,
    graphql_schema: GraphQLSchema | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The dataset is loaded and the schema validated before any route exists,
    so a broken schema or dataset stops the process before it listens.
    """
    try:
        if store is None:
            store = load_data_store(settings.data_path)

        logger.info("Validating GraphQL schema...")
        if graphql_schema is None:
            graphql_schema = load_schema()
    except BookshelfError as e:
        logger.error("Startup failed, refusing to serve", error=str(e))
        raise

    app = FastAPI(
        title="Bookshelf API",
        description="Authors and books over GraphQL",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.store = store
    app.state.max_body_size = settings.max_body_size
    app.state.pipeline = OperationPipeline(
        graphql_schema,
        mask_errors=settings.mask_errors,
        timeout=settings.request_timeout,
        max_tokens=settings.max_tokens,
    )

    app.add_middleware(LoggingContextMiddleware)
    # Outermost, so rejected and logged responses carry the header too
    app.add_middleware(CrossOriginMiddleware)

    app.add_exception_handler(TransportError, graphql_endpoints.transport_error_handler)
    app.add_exception_handler(StarletteHTTPException, graphql_endpoints.http_error_handler)
    app.include_router(graphql_endpoints.router)
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    setup_opentelemetry(app)

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
