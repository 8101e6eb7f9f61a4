from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_evaluator
from api.main import create_app
from config import Settings
from contracts import ValidationResult


@pytest.fixture
def client():
    with TestClient(create_app(Settings())) as c:
        yield c


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_evaluate_with_query_bindings(client):
    resp = client.post(
        "/v1/evaluate",
        params={"x": "1", "y": "0", "z": "1"},
        json={"expression": "(x AND y) OR z"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"result": True}


def test_evaluate_applies_precedence(client):
    resp = client.post("/v1/evaluate", json={"expression": "1 OR 0 AND 0"})

    assert resp.json() == {"result": True}


def test_evaluate_lowercases_query_keys(client):
    resp = client.post(
        "/v1/evaluate",
        params={"X": "1", "Y": "1"},
        json={"expression": "x AND Y"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"result": True}


def test_evaluate_missing_variable_is_client_error(client):
    resp = client.post(
        "/v1/evaluate",
        params={"x": "1", "y": "0"},
        json={"expression": "(x AND y) OR z"},
    )

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["kind"] == "unbound_variable"
    assert error["missing"] == ["z"]


def test_evaluate_rejects_non_binary_value(client):
    resp = client.post(
        "/v1/evaluate",
        params={"x": "2"},
        json={"expression": "x"},
    )

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["kind"] == "invalid_variable_value"
    assert error["name"] == "x"
    assert error["value"] == "2"


def test_evaluate_syntax_error_is_client_error(client):
    resp = client.post("/v1/evaluate", json={"expression": "1 1"})

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["kind"] == "trailing_input"
    assert error["position"] == 2


def test_evaluate_requires_body(client):
    resp = client.post("/v1/evaluate")

    assert resp.status_code == 422


def test_validate_valid_expression(client):
    resp = client.post("/v1/validate", json={"expression": "(a OR b) AND c"})

    assert resp.status_code == 200
    assert resp.json() == {"valid": True}


def test_validate_invalid_expression_is_still_200(client):
    resp = client.post("/v1/validate", json={"expression": "(1 AND 0"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] is False
    assert body["error"]["kind"] == "unmatched_paren"
    assert body["error"]["position"] == 0


def test_parse_returns_ast_and_variables(client):
    resp = client.post("/v1/parse", json={"expression": "1 OR X AND y"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["variables"] == ["x", "y"]
    assert body["nodes"] == [
        {"node_type": "binop", "op": "OR", "left": 1, "right": 2},
        {"node_type": "literal", "value": True},
        {"node_type": "binop", "op": "AND", "left": 3, "right": 4},
        {"node_type": "variable", "name": "x"},
        {"node_type": "variable", "name": "y"},
    ]


@pytest.mark.parametrize("expression", [
    " OR ".join(["0"] * 800),
    "1" + "OR1" * 1333,
])
def test_parse_long_chain_near_length_limit(client, expression):
    assert len(expression) <= 4096

    resp = client.post("/v1/parse", json={"expression": expression})

    assert resp.status_code == 200
    nodes = resp.json()["nodes"]
    assert len(nodes) == 2 * expression.count("O") + 1
    assert nodes[0]["node_type"] == "binop"
    assert nodes[0]["op"] == "OR"


def test_evaluate_long_chain_near_length_limit(client):
    resp = client.post("/v1/evaluate", json={"expression": "0" + "OR0" * 1333})

    assert resp.status_code == 200
    assert resp.json() == {"result": False}


def test_parse_lex_error(client):
    resp = client.post("/v1/parse", json={"expression": "1 NOT 0"})

    assert resp.status_code == 400
    assert resp.json()["error"]["kind"] == "lex_error"


class _FakeEvaluator:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, bool]]] = []

    def parse(self, text):
        raise NotImplementedError

    def validate(self, text):
        return ValidationResult(valid=True)

    def bind(self, ast, bindings):
        raise NotImplementedError

    def evaluate(self, ast, bindings):
        raise NotImplementedError

    def evaluate_expression(self, text, bindings):
        self.calls.append((text, dict(bindings)))
        return True


def test_evaluator_can_be_replaced_by_a_test_double():
    fake = _FakeEvaluator()
    app = create_app(Settings())
    app.dependency_overrides[get_evaluator] = lambda: fake

    with TestClient(app) as c:
        resp = c.post("/v1/evaluate", params={"Q": "0"}, json={"expression": "anything"})

    assert resp.json() == {"result": True}
    assert fake.calls == [("anything", {"q": False})]
