"""CLI entry point for typed-api-client."""

import asyncio
import json
import logging
from pathlib import Path

import click
import yaml
from pydantic import BaseModel

from typed_api_client.client import ApiClient
from typed_api_client.config import ClientOptions
from typed_api_client.errors import ApiClientError
from typed_api_client.openapi import dump_openapi
from typed_api_client.registry import TODO_REGISTRY

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _load_options(config: Path | None, base_url: str | None) -> ClientOptions:
    """Config file or environment first, then --base-url on top."""
    options = ClientOptions.from_file(config) if config else ClientOptions.from_env()
    if base_url:
        options = options.model_copy(update={"base_url": base_url})
    return options


def _parse_params(text: str | None) -> dict | None:
    """Parse --params as JSON or YAML (JSON is valid YAML)."""
    if not text:
        return None
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise click.BadParameter(f"not valid JSON/YAML: {e}", param_hint="--params")
    if not isinstance(data, dict):
        raise click.BadParameter("must be a mapping of parameter parts", param_hint="--params")
    return data


def _parse_headers(values: tuple[str, ...]) -> dict[str, str]:
    headers = {}
    for value in values:
        key, sep, val = value.partition(":")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY:VALUE, got {value!r}", param_hint="--header")
        headers[key.strip()] = val.strip()
    return headers


def _plain(value):
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def _to_json(result) -> str:
    return json.dumps(_plain(result), indent=2, ensure_ascii=False)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log requests and failures.")
def main(verbose: bool):
    """Typed API client: call registered endpoints with validated parameters and responses."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
def endpoints():
    """List every registered endpoint."""
    for endpoint in TODO_REGISTRY:
        click.echo(f"{endpoint.method.value:<7} {endpoint.path:<20} {endpoint.summary}")


@main.command()
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Write the OpenAPI YAML to a file.")
def schema(output: Path | None):
    """Export the registered endpoints as an OpenAPI 3 document."""
    text = dump_openapi(TODO_REGISTRY)
    if output is None:
        click.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"OpenAPI document saved to {output}")


@main.command()
@click.argument("method", type=click.Choice(METHODS, case_sensitive=False))
@click.argument("path")
@click.option("-p", "--params", default=None, help='Parameters as JSON/YAML, e.g. \'{"path": {"todoId": 1}}\'.')
@click.option("-H", "--header", "header_values", multiple=True, help="Extra header KEY:VALUE (repeatable).")
@click.option("--base-url", default=None, help="Override the base URL.")
@click.option("--config", type=click.Path(exists=True, path_type=Path), default=None, help="YAML client config file.")
def call(method: str, path: str, params: str | None, header_values: tuple[str, ...], base_url: str | None, config: Path | None):
    """Call one endpoint and print the validated response as JSON."""
    parsed_params = _parse_params(params)
    headers = _parse_headers(header_values)
    try:
        client = ApiClient(_load_options(config, base_url))
        result = asyncio.run(client.request(method, path, parsed_params, headers=headers))
    except ApiClientError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}")
    click.echo(_to_json(result))
