"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from .context import get_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def validate_schema() -> None:
    """Fail startup if the schema has dangling type references or cannot be introspected."""
    problems = [str(e) for e in gql_validate_schema(schema._schema)]
    if not problems:
        introspection = graphql_sync(schema._schema, get_introspection_query())
        problems = [str(e) for e in introspection.errors or []]

    if problems:
        logger.error("GraphQL schema is invalid", errors=problems)
        raise RuntimeError("Invalid GraphQL schema: " + "; ".join(problems))

    logger.debug("GraphQL schema validated", types=len(schema._schema.type_map))


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql",
        context_getter=get_context,
    )
