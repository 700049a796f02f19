"""Client-submitted GraphQL operation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

FIELD_MESSAGES = {
    "query": "GraphQL operation field 'query' must be a string",
    "operationName": "GraphQL operation field 'operationName' must be a string",
    "variables": "GraphQL operation field 'variables' must be an object",
}


class Operation(BaseModel):
    """Query text with an optional operation name and variables.

    Unknown keys such as ``extensions`` are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    query: StrictStr
    operation_name: StrictStr | None = Field(default=None, alias="operationName")
    variables: dict[str, Any] | None = None


def describe_operation_error(error: ValidationError) -> str:
    """Turn a pydantic validation failure into a single client-facing reason."""
    for detail in error.errors():
        field = detail["loc"][0] if detail["loc"] else None
        if field == "query" and detail["type"] == "missing":
            return "GraphQL operation 'query' field is required"
        if field in FIELD_MESSAGES:
            return FIELD_MESSAGES[field]
    return "GraphQL operation must be a JSON object"
