from .base import EndpointDefinition, HttpMethod, path_tokens
from .todos import TODO_ENDPOINTS, NewFeedback, Todo

__all__ = [
    "EndpointDefinition",
    "HttpMethod",
    "NewFeedback",
    "TODO_ENDPOINTS",
    "Todo",
    "path_tokens",
]
