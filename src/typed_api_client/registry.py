"""Endpoint registry: a read-only method -> path template -> definition table."""

from types import MappingProxyType
from typing import Iterable, Iterator

from typed_api_client.endpoints import TODO_ENDPOINTS, EndpointDefinition, HttpMethod
from typed_api_client.errors import EndpointDefinitionError, UnknownEndpoint


class EndpointRegistry:
    """Static lookup table of endpoint definitions.

    Populated once from ``definitions``; there is no way to register
    endpoints afterwards. Each (method, path) pair must be unique.
    """

    def __init__(self, definitions: Iterable[EndpointDefinition]):
        table: dict[HttpMethod, dict[str, EndpointDefinition]] = {}
        for definition in definitions:
            by_path = table.setdefault(definition.method, {})
            if definition.path in by_path:
                raise EndpointDefinitionError(f"Duplicate endpoint: {definition}")
            by_path[definition.path] = definition
        self._table = MappingProxyType(
            {method: MappingProxyType(by_path) for method, by_path in table.items()}
        )

    def lookup(self, method: HttpMethod | str, path: str) -> EndpointDefinition:
        """Return the definition for (method, path) or raise UnknownEndpoint."""
        try:
            parsed = HttpMethod.parse(method)
        except EndpointDefinitionError:
            raise UnknownEndpoint(str(method), path) from None
        try:
            return self._table[parsed][path]
        except KeyError:
            raise UnknownEndpoint(parsed.value, path) from None

    def paths(self, method: HttpMethod | str) -> list[str]:
        """Registered path templates for one method."""
        return list(self._table.get(HttpMethod.parse(method), {}))

    def __contains__(self, key: tuple[HttpMethod | str, str]) -> bool:
        method, path = key
        try:
            self.lookup(method, path)
        except UnknownEndpoint:
            return False
        return True

    def __iter__(self) -> Iterator[EndpointDefinition]:
        for by_path in self._table.values():
            yield from by_path.values()

    def __len__(self) -> int:
        return sum(len(by_path) for by_path in self._table.values())


TODO_REGISTRY = EndpointRegistry(TODO_ENDPOINTS)
