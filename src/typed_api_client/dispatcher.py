"""Request dispatcher: validate, resolve, send, validate again.

One call is one round trip. It either returns a value that conforms to the
endpoint's response schema or raises one of the errors in
``typed_api_client.errors``.
"""

import json
import logging
from typing import Any, Mapping

from pydantic import BaseModel

from typed_api_client.config import ClientOptions
from typed_api_client.endpoints import EndpointDefinition
from typed_api_client.errors import (
    ParameterValidationError,
    ResponsePayloadError,
    ResponseValidationError,
)
from typed_api_client.resolver import resolve_url, to_wire
from typed_api_client.schema import EndpointParameters, validate
from typed_api_client.transport import Transport, TransportRequest, TransportResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def _dump(part: BaseModel | None) -> dict[str, Any] | None:
    if part is None:
        return None
    return part.model_dump(mode="json", by_alias=True, exclude_none=True)


def validate_parameters(
    endpoint: EndpointDefinition,
    params: Mapping[str, Any] | EndpointParameters | None,
) -> EndpointParameters:
    """Gate caller parameters through the endpoint's parameter schema."""
    return validate(endpoint.parameters, {} if params is None else params, ParameterValidationError)


def serialize_body(params: EndpointParameters) -> bytes | None:
    body = _dump(getattr(params, "body", None))
    if body is None:
        return None
    return json.dumps(body).encode("utf-8")


def merge_headers(
    options: ClientOptions,
    params: EndpointParameters,
    headers: Mapping[str, str] | None = None,
    has_body: bool = False,
) -> dict[str, str]:
    """Defaults, then the ``header`` part, then call-site headers. Later wins."""
    merged = {"Content-Type": JSON_CONTENT_TYPE} if has_body else {}
    merged.update(dict(options.headers))
    header_part = _dump(getattr(params, "header", None)) or {}
    merged.update({key: to_wire(value) for key, value in header_part.items()})
    merged.update(headers or {})
    return merged


def parse_payload(response: TransportResponse) -> Any:
    """Decode a JSON response body into plain Python data."""
    if not response.content.strip():
        raise ResponsePayloadError("Empty response body", response.status_code, response.content)
    try:
        return json.loads(response.content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResponsePayloadError(f"Malformed JSON: {e}", response.status_code, response.content) from e


async def dispatch(
    endpoint: EndpointDefinition,
    params: Mapping[str, Any] | EndpointParameters | None,
    options: ClientOptions,
    transport: Transport,
    headers: Mapping[str, str] | None = None,
) -> Any:
    """Perform one call to ``endpoint`` and return the validated response."""
    validated = validate_parameters(endpoint, params)

    url = resolve_url(
        options.base_url,
        endpoint.path,
        _dump(getattr(validated, "path", None)),
        _dump(getattr(validated, "query", None)),
    )
    content = serialize_body(validated)
    request = TransportRequest(
        method=endpoint.method.value,
        url=url,
        headers=merge_headers(options, validated, headers, has_body=content is not None),
        content=content,
    )

    logger.debug("%s %s", request.method, request.url)
    response = await transport.send(request)
    if not response.ok:
        logger.warning("%s %s returned HTTP %s", request.method, request.url, response.status_code)

    payload = parse_payload(response)
    try:
        return validate(endpoint.response, payload, ResponseValidationError, status_code=response.status_code)
    except ResponseValidationError as e:
        logger.debug("Response of %s %s rejected: %s", request.method, request.url, e)
        raise
