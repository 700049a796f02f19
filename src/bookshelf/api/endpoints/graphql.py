"""
GraphQL-over-HTTP endpoints

POST /graphql runs an operation, OPTIONS on any path answers CORS preflight
requests and every other method/path combination is a 404.
"""

import json
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...errors import TransportError
from ...graphql.operation import Operation, describe_operation_error
from ...graphql.pipeline import OperationPipeline
from ...logging import get_logger, set_operation_name

logger = get_logger(__name__)
router = APIRouter()

GRAPHQL_RESPONSE_MEDIA_TYPE = "application/graphql-response+json; charset=utf-8"
PREFLIGHT_MAX_AGE = "7200"  # Chromium maximum


class GraphQLResponse(JSONResponse):
    media_type = GRAPHQL_RESPONSE_MEDIA_TYPE


def require_json_content_type(request: Request) -> None:
    # Requiring application/json forces browsers to preflight cross-origin
    # requests, so no operation runs for a request CORS would have blocked.
    content_type = request.headers.get("content-type")
    if content_type is None:
        raise TransportError(400, "Content-Type header must be 'application/json'")

    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != "application/json":
        raise TransportError(400, "Content-Type header must be 'application/json'")


async def read_body(request: Request, limit: int) -> bytes:
    """Buffer the request body, rejecting anything larger than ``limit`` bytes."""
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise TransportError(413, "Request body too large")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise TransportError(413, "Request body too large")
    return bytes(body)


def decode_operation(body: bytes) -> Operation:
    try:
        payload: Any = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise TransportError(400, "Failed to parse JSON body") from e

    try:
        return Operation.model_validate(payload)
    except ValidationError as e:
        raise TransportError(400, describe_operation_error(e)) from e


@router.post("/graphql")
async def graphql_endpoint(request: Request) -> Response:
    """Run a GraphQL operation submitted as a JSON body."""
    require_json_content_type(request)

    body = await read_body(request, request.app.state.max_body_size)
    operation = decode_operation(body)
    set_operation_name(operation.operation_name)
    request.state.graphql_operation = operation.operation_name

    pipeline: OperationPipeline = request.app.state.pipeline
    context = {"request": request, "store": request.app.state.store}
    outcome = await pipeline.run(operation, context)

    return GraphQLResponse(outcome.to_payload(), status_code=outcome.status_code)


@router.options("/{path:path}")
async def preflight(request: Request) -> Response:
    """Answer a CORS preflight request."""
    if not request.headers.get("origin"):
        raise TransportError(400, "Preflight request without Origin header")

    headers = {
        # Intermediate caches must key preflight responses on these
        "Vary": "Origin, Access-Control-Request-Headers",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Max-Age": PREFLIGHT_MAX_AGE,
    }
    requested_headers = request.headers.get("access-control-request-headers")
    if requested_headers:
        headers["Access-Control-Allow-Headers"] = requested_headers

    return Response(status_code=204, headers=headers)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Unrouted paths and unsupported methods are both plain 404s."""
    status_code = 404 if exc.status_code in (404, 405) else exc.status_code
    logger.info(
        "No route",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
    )
    return Response(status_code=status_code)


async def transport_error_handler(request: Request, exc: TransportError) -> Response:
    logger.warning(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
        reason=exc.reason,
    )
    return Response(status_code=exc.status_code)
