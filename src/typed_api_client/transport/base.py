"""Transport contract: how the dispatcher hands a request to the network."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class TransportRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    content: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Anything that can perform one HTTP exchange.

    Implementations raise TransportError when the exchange cannot complete.
    An HTTP error status is still a completed exchange and is returned.
    """

    async def send(self, request: TransportRequest) -> TransportResponse: ...
