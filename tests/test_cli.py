import json
from pathlib import Path
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from typed_api_client.cli import _parse_headers, _parse_params, main
from typed_api_client.errors import TransportError
from typed_api_client.transport import TransportResponse

FIXTURES = Path(__file__).parent / "fixtures"

TODO = {"userId": 1, "id": 1, "title": "a", "completed": False}


def _response(payload, status_code=200):
    return TransportResponse(status_code=status_code, content=json.dumps(payload).encode("utf-8"))


class TestCliEndpoints:
    def test_lists_all_endpoints(self):
        result = CliRunner().invoke(main, ["endpoints"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 6
        assert any(line.startswith("DELETE") and "/todos/{todoId}" in line for line in lines)


class TestCliSchema:
    def test_schema_to_stdout(self):
        result = CliRunner().invoke(main, ["schema"])
        assert result.exit_code == 0
        assert "/todos/{todoId}" in yaml.safe_load(result.output)["paths"]

    def test_schema_to_file(self, tmp_path):
        output = tmp_path / "out" / "openapi.yaml"
        result = CliRunner().invoke(main, ["schema", "-o", str(output)])
        assert result.exit_code == 0
        assert output.exists()
        assert yaml.safe_load(output.read_text())["openapi"].startswith("3.")


class TestCliCall:
    @patch("typed_api_client.transport.http.HttpxTransport.send")
    def test_call_prints_validated_json(self, mock_send):
        mock_send.return_value = _response({**TODO, "extra": "dropped"})
        result = CliRunner().invoke(main, [
            "call", "GET", "/todos/{todoId}",
            "--params", '{"path": {"todoId": 1}}',
            "--base-url", "https://api.example.com",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == TODO
        request = mock_send.call_args[0][0]
        assert request.url == "https://api.example.com/todos/1"

    @patch("typed_api_client.transport.http.HttpxTransport.send")
    def test_call_with_config_and_header(self, mock_send):
        mock_send.return_value = _response([TODO])
        result = CliRunner().invoke(main, [
            "call", "get", "/todos",
            "-p", "query: {_page: 2}",
            "--config", str(FIXTURES / "client.yaml"),
            "-H", "X-Trace: abc",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [TODO]
        request = mock_send.call_args[0][0]
        assert request.url == "https://api.example.com/todos?_page=2"
        assert request.headers["Authorization"] == "Bearer from-file"
        assert request.headers["X-Trace"] == "abc"

    @patch("typed_api_client.transport.http.HttpxTransport.send")
    def test_invalid_params_exit_non_zero(self, mock_send):
        result = CliRunner().invoke(main, [
            "call", "POST", "/todos",
            "--params", '{"body": {"title": ""}}',
            "--base-url", "https://api.example.com",
        ])
        assert result.exit_code == 1
        assert "ParameterValidationError" in result.output
        mock_send.assert_not_called()

    def test_unknown_endpoint(self):
        result = CliRunner().invoke(main, ["call", "GET", "/users", "--base-url", "https://api.example.com"])
        assert result.exit_code == 1
        assert "UnknownEndpoint" in result.output

    @patch("typed_api_client.transport.http.HttpxTransport.send")
    def test_transport_error(self, mock_send):
        mock_send.side_effect = TransportError("connection refused", "GET", "https://api.example.com/todos/1")
        result = CliRunner().invoke(main, [
            "call", "GET", "/todos/{todoId}",
            "--params", '{"path": {"todoId": 1}}',
            "--base-url", "https://api.example.com",
        ])
        assert result.exit_code == 1
        assert "connection refused" in result.output

    def test_invalid_base_url_reported(self):
        result = CliRunner().invoke(main, [
            "call", "GET", "/todos/{todoId}",
            "--params", '{"path": {"todoId": 1}}',
            "--base-url", "https://api.example.com:abc",
        ])
        assert result.exit_code == 1
        assert "TransportError" in result.output

    def test_bad_params_text(self):
        result = CliRunner().invoke(main, ["call", "GET", "/todos", "--params", "[1, 2]"])
        assert result.exit_code == 2


class TestCliHelpers:
    def test_parse_params_yaml(self):
        assert _parse_params("path: {todoId: 3}") == {"path": {"todoId": 3}}

    def test_parse_params_empty(self):
        assert _parse_params(None) is None

    def test_parse_headers(self):
        assert _parse_headers(("Accept: text/plain", "X-A:b")) == {"Accept": "text/plain", "X-A": "b"}
