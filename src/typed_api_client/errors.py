"""Error taxonomy for the typed API client.

Every failure of a single call surfaces as one of these. Nothing here is
retried or swallowed by the library.
"""

from typing import Any

from pydantic import BaseModel


class Violation(BaseModel):
    """One schema violation: where it happened, what was wrong, what we got."""

    location: str  # dotted schema path, e.g. body.title
    message: str
    input: Any = None

    def __str__(self) -> str:
        where = self.location or "<root>"
        return f"{where}: {self.message} (got {self.input!r})"


class ApiClientError(Exception):
    """Base class for all client errors."""


class SchemaValidationError(ApiClientError):
    """A value did not conform to a declared schema."""

    kind = "value"

    def __init__(self, violations: list[Violation], status_code: int | None = None):
        self.violations = violations
        self.status_code = status_code
        super().__init__(self._describe())

    def _describe(self) -> str:
        header = f"Invalid {self.kind}"
        if self.status_code is not None:
            header += f" (HTTP {self.status_code})"
        lines = [f"{header}:"] + [f"  {v}" for v in self.violations]
        return "\n".join(lines)


class ParameterValidationError(SchemaValidationError):
    """Caller-supplied parameters do not match the endpoint's parameter schema."""

    kind = "parameters"


class ResponseValidationError(SchemaValidationError):
    """The parsed response does not match the endpoint's response schema."""

    kind = "response"


class TransportError(ApiClientError):
    """The network exchange could not be completed."""

    def __init__(self, message: str, method: str = "", url: str = ""):
        self.method = method
        self.url = url
        super().__init__(f"{method} {url}: {message}" if url else message)


class ResponsePayloadError(ApiClientError):
    """The response body could not be parsed into structured data."""

    def __init__(self, message: str, status_code: int, content: bytes = b""):
        self.status_code = status_code
        self.content = content
        snippet = content[:200].decode("utf-8", errors="replace")
        super().__init__(f"{message} (HTTP {status_code}, body: {snippet!r})")


class UnknownEndpoint(ApiClientError, LookupError):
    """No endpoint is registered for the requested (method, path) pair."""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"No endpoint registered for {method} {path}")


class EndpointDefinitionError(ApiClientError, ValueError):
    """An endpoint definition or registry is internally inconsistent."""


class ConfigError(ApiClientError):
    """Client configuration could not be loaded."""
