"""Typed HTTP client: registered endpoints, validated parameters and responses."""

from .client import ApiClient
from .config import ClientOptions
from .endpoints import EndpointDefinition, HttpMethod, NewFeedback, Todo
from .errors import (
    ApiClientError,
    ConfigError,
    EndpointDefinitionError,
    ParameterValidationError,
    ResponsePayloadError,
    ResponseValidationError,
    TransportError,
    UnknownEndpoint,
)
from .registry import TODO_REGISTRY, EndpointRegistry

__all__ = [
    "ApiClient",
    "ApiClientError",
    "ClientOptions",
    "ConfigError",
    "EndpointDefinition",
    "EndpointDefinitionError",
    "EndpointRegistry",
    "HttpMethod",
    "NewFeedback",
    "ParameterValidationError",
    "ResponsePayloadError",
    "ResponseValidationError",
    "TODO_REGISTRY",
    "Todo",
    "TransportError",
    "UnknownEndpoint",
]
