"""Tests for Operation decoding and its client-facing error reasons."""

import pytest
from pydantic import ValidationError

from bookshelf.graphql.operation import Operation, describe_operation_error


def reason_for(payload) -> str:
    with pytest.raises(ValidationError) as exc_info:
        Operation.model_validate(payload)
    return describe_operation_error(exc_info.value)


def test_minimal_operation():
    operation = Operation.model_validate({"query": "{ books { title } }"})
    assert operation.query == "{ books { title } }"
    assert operation.operation_name is None
    assert operation.variables is None


def test_full_operation():
    operation = Operation.model_validate(
        {
            "query": "query Q { books { title } }",
            "operationName": "Q",
            "variables": {"x": [1, 2]},
            "extensions": {"persistedQuery": {}},
        }
    )
    assert operation.operation_name == "Q"
    assert operation.variables == {"x": [1, 2]}


def test_explicit_null_variables():
    operation = Operation.model_validate({"query": "{ books { title } }", "variables": None})
    assert operation.variables is None


@pytest.mark.parametrize(
    "payload,reason",
    [
        ({}, "GraphQL operation 'query' field is required"),
        ({"variables": [1]}, "GraphQL operation 'query' field is required"),
        ({"query": 1}, "GraphQL operation field 'query' must be a string"),
        ({"query": None}, "GraphQL operation field 'query' must be a string"),
        ({"query": "{a}", "variables": [1, 2]}, "GraphQL operation field 'variables' must be an object"),
        ({"query": "{a}", "variables": "x"}, "GraphQL operation field 'variables' must be an object"),
        ({"query": "{a}", "operationName": 5}, "GraphQL operation field 'operationName' must be a string"),
        ([1, 2], "GraphQL operation must be a JSON object"),
        ("query", "GraphQL operation must be a JSON object"),
    ],
)
def test_rejections(payload, reason):
    assert reason_for(payload) == reason
