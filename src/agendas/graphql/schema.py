"""
GraphQL schema and FastAPI router
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..logging import get_logger
from .errors import AgendaGraphQLError
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class AgendaSchema(strawberry.Schema):
    """Schema that logs rejected operations by error code instead of as crashes."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, AgendaGraphQLError):
                logger.info("Operation rejected", code=original.code.value, path=error.path)
            elif original is None:
                # Parse, validation and variable coercion failures
                logger.info("Invalid GraphQL request", error=error.message)
            else:
                logger.error(
                    "Unhandled error in resolver",
                    path=error.path,
                    error=str(original),
                    exc_info=original,
                )


schema = AgendaSchema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Fail fast at startup if the generated schema is inconsistent."""
    errors = gql_validate_schema(schema._schema)
    if errors:
        message = "; ".join(e.message for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise RuntimeError(f"GraphQL schema validation failed: {message}")
    logger.info("GraphQL schema validation successful")


async def get_context(request: Request) -> dict[str, Any]:
    """Resolvers read the caller's Authorization header from the request."""
    return {"request": request}


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql",
        context_getter=get_context,
    )
