"""Turn a base URL, a path template and parameter values into a request URL."""

from typing import Any, Mapping
from urllib.parse import quote, urlencode

from typed_api_client.endpoints.base import PATH_TOKEN
from typed_api_client.errors import ParameterValidationError, Violation


def to_wire(value: Any) -> str:
    """String form of a parameter value as it goes on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_path(template: str, path_params: Mapping[str, Any] | None = None) -> str:
    """Substitute every ``{name}`` token of ``template``.

    A token with no value, or whose value stringifies to "", is an error
    rather than an empty path segment.
    """
    values = path_params or {}

    def substitute(match):
        name = match.group(1)
        value = values.get(name)
        text = "" if value is None else to_wire(value)
        if not text:
            raise ParameterValidationError(
                [Violation(location=f"path.{name}", message="Missing value for path token", input=value)]
            )
        return quote(text, safe="")

    return PATH_TOKEN.sub(substitute, template)


def build_query(query_params: Mapping[str, Any] | None) -> str:
    """Encode query parameters in mapping order, skipping ``None`` values."""
    if not query_params:
        return ""
    pairs = [(key, to_wire(value)) for key, value in query_params.items() if value is not None]
    return urlencode(pairs)


def resolve_url(
    base_url: str,
    path: str,
    path_params: Mapping[str, Any] | None = None,
    query_params: Mapping[str, Any] | None = None,
) -> str:
    """Build the final request URL. Pure and deterministic."""
    url = base_url.rstrip("/") + resolve_path(path, path_params)
    query = build_query(query_params)
    return f"{url}?{query}" if query else url
