"""Export a registry as an OpenAPI 3 document.

Parameters, request bodies and responses come straight from the pydantic
schemas, so the document always matches what the client validates.
"""

from typing import Any

import yaml
from pydantic import TypeAdapter

from typed_api_client.registry import EndpointRegistry
from typed_api_client.schema import part_model

REF_TEMPLATE = "#/components/schemas/{model}"

# parameter part -> OpenAPI "in"
LOCATIONS = {"path": "path", "query": "query", "header": "header"}


def _json_schema(schema: Any, components: dict) -> dict:
    doc = TypeAdapter(schema).json_schema(by_alias=True, ref_template=REF_TEMPLATE)
    components.update(doc.pop("$defs", {}))
    return doc


def _parameters(model, location: str, components: dict) -> list[dict]:
    schema = _json_schema(model, components)
    required = set(schema.get("required", []))
    result = []
    for name, prop in schema.get("properties", {}).items():
        result.append({
            "name": name,
            "in": location,
            "required": location == "path" or name in required,
            "schema": prop,
        })
    return result


def build_openapi(registry: EndpointRegistry, title: str = "Todo API", version: str = "1.0.0") -> dict:
    """Build an OpenAPI 3 document (as a dict) for every registered endpoint."""
    components: dict[str, dict] = {}
    paths: dict[str, dict] = {}

    for endpoint in registry:
        operation: dict[str, Any] = {"summary": endpoint.summary}

        params = []
        for part, location in LOCATIONS.items():
            model = part_model(endpoint.parameters, part)
            if model is not None:
                params.extend(_parameters(model, location, components))
        if params:
            operation["parameters"] = params

        body_model = part_model(endpoint.parameters, "body")
        if body_model is not None:
            operation["requestBody"] = {
                "required": endpoint.parameters.model_fields["body"].is_required(),
                "content": {"application/json": {"schema": _json_schema(body_model, components)}},
            }

        operation["responses"] = {
            "200": {
                "description": "Successful response",
                "content": {"application/json": {"schema": _json_schema(endpoint.response, components)}},
            }
        }
        paths.setdefault(endpoint.path, {})[endpoint.method.value.lower()] = operation

    return {
        "openapi": "3.0.3",
        "info": {"title": title, "version": version},
        "paths": paths,
        "components": {"schemas": components},
    }


def dump_openapi(registry: EndpointRegistry) -> str:
    return yaml.safe_dump(build_openapi(registry), sort_keys=False, allow_unicode=True)
