"""Client options: base URL and default headers, fixed per client instance."""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, TypedDict

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from typed_api_client.errors import ConfigError

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


# Headers commonly set once per client
DefaultHeaders = TypedDict(
    "DefaultHeaders",
    {"Accept": str, "Authorization": str, "Content-Type": str},
    total=False,
)


class ClientOptions(BaseModel):
    """Immutable options shared by every call a client makes.

    Call-site headers are merged over ``headers``; call-site values win.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(min_length=1)
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("headers")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @classmethod
    def from_env(cls) -> "ClientOptions":
        """Build options from API_BASE_URL and API_TOKEN."""
        headers = {"Accept": "application/json"}
        token = os.getenv("API_TOKEN", "")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return cls(base_url=os.getenv("API_BASE_URL", DEFAULT_BASE_URL), headers=headers)

    @classmethod
    def from_file(cls, file_path: Path) -> "ClientOptions":
        """Load options from a YAML file with ``base_url`` and ``headers`` keys."""
        try:
            data = yaml.safe_load(Path(file_path).read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read client config {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Client config {file_path} must be a mapping")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid client config {file_path}: {e}") from e
