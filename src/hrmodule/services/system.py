"""Module health and dashboard counters."""

from hrmodule.http.transport import Call, RequestOptions, Transport
from hrmodule.services.base import Record


class SystemService:
    __slots__ = ("_transport",)

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def health_check(self, options: RequestOptions | None = None) -> Record:
        return await self._transport.send(Call("GET", "/health"), options)

    async def stats(self, options: RequestOptions | None = None) -> Record:
        """Return ``{"stats": {...}}`` with request and absence-type counts."""
        return await self._transport.send(Call("GET", "/stats"), options)
