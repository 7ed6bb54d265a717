"""GraphQL endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from graphql import graphql_sync, print_schema
from pydantic import BaseModel, Field

from block_editor.api.dependencies import get_schema_build

logger = logging.getLogger("block_editor.api.graphql")

router = APIRouter(tags=["graphql"])


class GraphQLRequest(BaseModel):
    query: str = Field(..., max_length=20000)
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")

    model_config = {"populate_by_name": True}


@router.post("/graphql")
def execute(request: GraphQLRequest) -> dict[str, Any]:
    """Execute a query against the schema with a fresh request context."""
    build = get_schema_build()
    result = graphql_sync(
        build.schema,
        request.query,
        context_value=build.create_context(),
        variable_values=request.variables,
        operation_name=request.operation_name,
    )
    response: dict[str, Any] = {"data": result.data}
    if result.errors:
        logger.warning("GraphQL request returned %d errors", len(result.errors))
        response["errors"] = [error.formatted for error in result.errors]
    return response


@router.get("/graphql/schema", response_class=PlainTextResponse)
def schema_sdl() -> str:
    """The schema in SDL form."""
    return print_schema(get_schema_build().schema)
