from pathlib import Path

import pytest
from pydantic import ValidationError

from typed_api_client.config import DEFAULT_BASE_URL, ClientOptions
from typed_api_client.errors import ConfigError

FIXTURES = Path(__file__).parent / "fixtures"


class TestClientOptions:
    def test_defaults(self):
        options = ClientOptions(base_url="https://api.example.com")
        assert options.headers == {}

    def test_empty_base_url_rejected(self):
        with pytest.raises(ValidationError):
            ClientOptions(base_url="")

    def test_immutable(self):
        options = ClientOptions(base_url="https://api.example.com")
        with pytest.raises(ValidationError):
            options.base_url = "https://other.example.com"

    def test_headers_cannot_be_mutated(self):
        options = ClientOptions(base_url="https://api.example.com", headers={"Authorization": "Bearer a"})
        with pytest.raises(TypeError):
            options.headers["Authorization"] = "Bearer other"
        assert options.headers["Authorization"] == "Bearer a"

    def test_headers_copied_from_source(self):
        source = {"Authorization": "Bearer a"}
        options = ClientOptions(base_url="https://api.example.com", headers=source)
        source["Authorization"] = "Bearer other"
        assert options.headers["Authorization"] == "Bearer a"

    def test_default_headers_read_only(self):
        with pytest.raises(TypeError):
            ClientOptions(base_url="https://api.example.com").headers["Accept"] = "text/plain"


class TestFromEnv:
    def test_default_base_url(self, monkeypatch):
        monkeypatch.delenv("API_BASE_URL", raising=False)
        monkeypatch.delenv("API_TOKEN", raising=False)
        options = ClientOptions.from_env()
        assert options.base_url == DEFAULT_BASE_URL
        assert "Authorization" not in options.headers

    def test_token_becomes_bearer_header(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "http://localhost:8080")
        monkeypatch.setenv("API_TOKEN", "secret")
        options = ClientOptions.from_env()
        assert options.base_url == "http://localhost:8080"
        assert options.headers["Authorization"] == "Bearer secret"


class TestFromFile:
    def test_load_yaml(self):
        options = ClientOptions.from_file(FIXTURES / "client.yaml")
        assert options.base_url == "https://api.example.com"
        assert options.headers["Authorization"] == "Bearer from-file"

    def test_missing_base_url(self):
        with pytest.raises(ConfigError):
            ClientOptions.from_file(FIXTURES / "bad_client.yaml")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ClientOptions.from_file(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            ClientOptions.from_file(f)

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "broken.yaml"
        f.write_text("base_url: [unclosed\n")
        with pytest.raises(ConfigError):
            ClientOptions.from_file(f)
