from .base import Transport, TransportRequest, TransportResponse
from .http import HttpxTransport

__all__ = ["HttpxTransport", "Transport", "TransportRequest", "TransportResponse"]
