"""
GraphQL operation pipeline

Runs parse, validate and execute strictly in sequence against a validated
schema. Each invocation yields exactly one outcome:

- ParseFailure: the query text is not valid GraphQL syntax
- ValidationFailure: the document breaks one or more validation rules
- ExecutionOutcome: execution ran; data may be partial and errors present
"""

from __future__ import annotations

import asyncio
from collections.abc import Collection
from dataclasses import dataclass, field
from inspect import isawaitable
from typing import Any

from graphql import (
    ExecutionResult,
    GraphQLError,
    GraphQLSchema,
    execute,
    parse,
    specified_rules,
    validate,
)
from graphql.validation import ASTValidationRule
from opentelemetry import trace

from ..errors import BookshelfError
from ..logging import get_logger
from .operation import Operation

logger = get_logger(__name__)
tracer = trace.get_tracer(__name__)

MASKED_ERROR_MESSAGE = "Unexpected error."
TIMEOUT_ERROR_MESSAGE = "Operation timed out."
NESTING_ERROR_MESSAGE = "Document is too deeply nested."


@dataclass(frozen=True)
class ParseFailure:
    error: GraphQLError

    status_code = 400

    def to_payload(self) -> dict[str, Any]:
        return {"errors": [self.error.formatted]}


@dataclass(frozen=True)
class ValidationFailure:
    errors: list[GraphQLError]

    status_code = 400

    def to_payload(self) -> dict[str, Any]:
        return {"errors": [error.formatted for error in self.errors]}


@dataclass(frozen=True)
class ExecutionOutcome:
    data: dict[str, Any] | None
    errors: list[GraphQLError] = field(default_factory=list)

    status_code = 200

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"data": self.data}
        if self.errors:
            payload["errors"] = [error.formatted for error in self.errors]
        return payload


PipelineOutcome = ParseFailure | ValidationFailure | ExecutionOutcome


def is_exposed_error(error: GraphQLError) -> bool:
    """Whether an execution error's message may be shown to the client.

    Errors raised by the engine itself and domain errors are exposed; any
    other exception escaping a resolver is an internal fault.
    """
    original = error.original_error
    return original is None or isinstance(original, (GraphQLError, BookshelfError))


def mask_error(error: GraphQLError) -> GraphQLError:
    """Replace an unexpected error with a generic one, keeping its location and path."""
    return GraphQLError(
        MASKED_ERROR_MESSAGE,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=None,
    )


class OperationPipeline:
    """Parse, validate and execute operations against one schema."""

    def __init__(
        self,
        schema: GraphQLSchema,
        rules: Collection[type[ASTValidationRule]] | None = None,
        mask_errors: bool = True,
        timeout: float | None = None,
        max_tokens: int | None = None,
    ):
        self.schema = schema
        self.rules = list(specified_rules if rules is None else rules)
        self.mask_errors = mask_errors
        self.timeout = timeout
        self.max_tokens = max_tokens

    async def run(self, operation: Operation, context: Any = None) -> PipelineOutcome:
        with tracer.start_as_current_span("graphql.parse"):
            try:
                document = parse(operation.query, max_tokens=self.max_tokens)
            except GraphQLError as e:
                logger.warning("GraphQL parse error", error=e.message)
                return ParseFailure(e)
            except RecursionError:
                logger.warning("GraphQL document too deeply nested to parse")
                return ParseFailure(GraphQLError(NESTING_ERROR_MESSAGE))

        with tracer.start_as_current_span("graphql.validate"):
            try:
                validation_errors = validate(self.schema, document, self.rules)
            except RecursionError:
                logger.warning("GraphQL document too deeply nested to validate")
                return ValidationFailure([GraphQLError(NESTING_ERROR_MESSAGE)])

            if validation_errors:
                logger.warning(
                    "GraphQL validation failed",
                    errors=[error.message for error in validation_errors],
                )
                return ValidationFailure(list(validation_errors))

        with tracer.start_as_current_span("graphql.execute") as span:
            if operation.operation_name:
                span.set_attribute("graphql.operation.name", operation.operation_name)

            try:
                result = execute(
                    self.schema,
                    document,
                    context_value=context,
                    variable_values=operation.variables,
                    operation_name=operation.operation_name,
                )
                if isawaitable(result):
                    result = await asyncio.wait_for(result, self.timeout)
            except asyncio.TimeoutError:
                logger.error("GraphQL execution timed out", timeout=self.timeout)
                return ExecutionOutcome(None, [GraphQLError(TIMEOUT_ERROR_MESSAGE)])
            except RecursionError:
                logger.error("GraphQL execution exceeded the recursion limit")
                return ExecutionOutcome(None, [GraphQLError(MASKED_ERROR_MESSAGE)])

            return self._complete(result)

    def _complete(self, result: ExecutionResult) -> ExecutionOutcome:
        errors = list(result.errors or [])
        if not errors:
            logger.debug("GraphQL execution succeeded")
            return ExecutionOutcome(result.data)

        processed = []
        for error in errors:
            if is_exposed_error(error):
                logger.info("GraphQL execution error", error=error.message, path=error.path)
                processed.append(error)
                continue

            logger.error(
                "Unexpected error during GraphQL execution",
                error=str(error.original_error),
                path=error.path,
                exc_info=error.original_error,
            )
            processed.append(mask_error(error) if self.mask_errors else error)

        return ExecutionOutcome(result.data, processed)
