"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from graphql import GraphQLSchema, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema

from ..errors import SchemaStartupError
from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)

# Type names are registered here; lazy Author/Book references are bound when
# strawberry converts the types into the core schema.
schema = strawberry.Schema(query=Query)


def check_schema(graphql_schema: GraphQLSchema) -> list[str]:
    """Structurally validate a core GraphQL schema.

    Returns:
        Error messages, empty when the schema is valid
    """
    errors = gql_validate_schema(graphql_schema)
    if errors:
        return [str(e) for e in errors]

    # Introspection walks every type and field, catching unresolved references
    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        return [f"Introspection failed: {e}" for e in result.errors]

    return []


def load_schema(strawberry_schema: strawberry.Schema = schema) -> GraphQLSchema:
    """Validate the GraphQL schema once at startup and return the executable handle.

    Raises:
        SchemaStartupError: If the schema is invalid
    """
    graphql_schema = strawberry_schema._schema

    errors = check_schema(graphql_schema)
    if errors:
        logger.error("GraphQL schema validation failed", errors=errors)
        raise SchemaStartupError(errors)

    logger.info("GraphQL schema validation successful")
    return graphql_schema
