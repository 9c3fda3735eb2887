"""Endpoint definitions: one (method, path template) pair and its schemas.

Definitions are pure data, built once at import time. Construction checks
that the path template and the ``path`` parameter part agree.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from typed_api_client.errors import EndpointDefinitionError
from typed_api_client.schema import EndpointParameters, field_names, has_required_parts, part_model

PATH_TOKEN = re.compile(r"\{(\w+)\}")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: "HttpMethod | str") -> "HttpMethod":
        """Accept an HttpMethod or a method name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise EndpointDefinitionError(f"Unsupported HTTP method: {value!r}") from None


def path_tokens(template: str) -> list[str]:
    """Return the ``{name}`` tokens of a path template, in order.

    Raises EndpointDefinitionError for unbalanced braces such as
    ``/todos/{todoId``.
    """
    stripped = PATH_TOKEN.sub("", template)
    if "{" in stripped or "}" in stripped:
        raise EndpointDefinitionError(f"Malformed path template: {template!r}")
    return PATH_TOKEN.findall(template)


@dataclass(frozen=True)
class EndpointDefinition:
    """A single endpoint: method, path template, parameter and response schemas."""

    method: HttpMethod
    path: str
    parameters: type[EndpointParameters]
    response: Any  # model class or adaptable type such as list[Todo]
    summary: str = ""

    def __post_init__(self):
        object.__setattr__(self, "method", HttpMethod.parse(self.method))
        if not self.path.startswith("/"):
            raise EndpointDefinitionError(f"Path template must start with '/': {self.path!r}")

        tokens = path_tokens(self.path)
        if len(set(tokens)) != len(tokens):
            raise EndpointDefinitionError(f"Duplicate path token in {self.path!r}")

        path_model = part_model(self.parameters, "path")
        declared = set(field_names(path_model)) if path_model else set()
        if declared != set(tokens):
            raise EndpointDefinitionError(
                f"{self.method.value} {self.path}: path tokens {sorted(tokens)} "
                f"do not match path parameters {sorted(declared)}"
            )

    @property
    def key(self) -> tuple[HttpMethod, str]:
        return self.method, self.path

    @property
    def parameters_required(self) -> bool:
        """True when at least one parameter part must be supplied."""
        return has_required_parts(self.parameters)

    def __str__(self) -> str:
        return f"{self.method.value} {self.path}"
