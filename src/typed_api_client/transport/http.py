"""Default transport built on httpx."""

import logging

import httpx

from typed_api_client.errors import TransportError

from .base import TransportRequest, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Sends each request on a fresh ``httpx.AsyncClient``.

    One call, one exchange: no pooling and no retries. Timeouts are off
    unless ``timeout`` is given.
    """

    def __init__(self, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        self._transport = transport

    async def send(self, request: TransportRequest) -> TransportResponse:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    request.method,
                    request.url,
                    headers=request.headers,
                    content=request.content,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("Transport failure for %s %s: %s", request.method, request.url, exc)
            raise TransportError(str(exc) or type(exc).__name__, request.method, request.url) from exc

        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )
