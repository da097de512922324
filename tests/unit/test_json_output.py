import json

from envfile.errors import MalformedLineError, MissingRequiredVariableError, ValidationError
from envfile.json_output import describe_error, to_json, wrap_json_response


def test_wrap_json_response_carries_file_and_action():
    data = wrap_json_response(action="show", success=True, file="/app/.env", details={"variables": {"A": "1"}})
    assert data["tool"] == "envfile"
    assert data["action"] == "show"
    assert data["file"] == "/app/.env"
    assert data["errors"] == []
    assert json.loads(to_json(data)) == data


def test_describe_missing_variables():
    entry = describe_error(MissingRequiredVariableError(["A", "B"]))
    assert entry["type"] == "MissingRequiredVariableError"
    assert entry["missing"] == ["A", "B"]


def test_describe_failed_assertions():
    entry = describe_error(ValidationError({"PORT": "is not an integer"}))
    assert entry["failures"] == {"PORT": "is not an integer"}


def test_describe_malformed_lines():
    entry = describe_error(MalformedLineError([(3, "=x", "empty variable name")], path="/app/.env"))
    assert entry["lines"] == [{"line": 3, "content": "=x", "reason": "empty variable name"}]
    assert "/app/.env" in entry["message"]


def test_describe_plain_error():
    entry = describe_error(FileNotFoundError("Env file not found at: /x/.env"))
    assert entry == {"type": "FileNotFoundError", "message": "Env file not found at: /x/.env"}
