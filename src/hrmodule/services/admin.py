"""Host-scoped administrative queries.

These target the shell's own admin API rather than the module's base
path. Only the paged user listing is needed, for picking request owners
and allowance holders.
"""

from typing import Any

from hrmodule.http.query import Paging, build_query
from hrmodule.http.transport import Call, RequestOptions, Transport
from hrmodule.services.base import Record


class AdminService:
    __slots__ = ("_transport",)

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def users_call(self, paging: Paging | None = None, **filters: Any) -> Call:
        params = {**filters, **(paging or Paging()).params()}
        return Call("GET", "/users", query=build_query(params), scope="admin")

    async def list_users(
        self,
        paging: Paging | None = None,
        options: RequestOptions | None = None,
        **filters: Any,
    ) -> Record:
        return await self._transport.send(self.users_call(paging, **filters), options)
