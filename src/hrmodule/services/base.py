"""Shared CRUD shape for entity services.

Mirrors the REST layout every HR collection follows::

    GET    {collection}            list (filters + paging in the query)
    GET    {collection}/{id}       get
    POST   {collection}            create
    PUT    {collection}/{id}       update (partial data + field mask)
    DELETE {collection}/{id}       delete

Single-entity responses are wrapped in an envelope keyed by the entity
name (``{"absenceType": {...}}``); the envelope is returned unchanged.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias
from urllib.parse import quote

from hrmodule.fieldmask import update_body
from hrmodule.http.query import Paging, build_query
from hrmodule.http.transport import Call, RequestOptions, Transport

Record: TypeAlias = dict[str, Any]


def entity_path(collection: str, entity_id: str) -> str:
    if not entity_id:
        msg = "Entity id must be a non-empty string"
        raise ValueError(msg)
    return f"{collection}/{quote(str(entity_id), safe='')}"


class EntityService:
    """Base for services over one REST collection.

    Subclasses set ``collection`` and ``envelope`` and add their domain
    actions. The ``*_call`` methods are pure: they only shape the
    request, which keeps the wire format testable without I/O.
    """

    collection: str = ""
    envelope: str = ""

    __slots__ = ("_transport",)

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    # -- Call shaping --

    def normalize(self, data: Mapping[str, Any]) -> Record:
        """Hook for per-entity payload normalization. Identity by default."""
        return dict(data)

    def list_call(self, filters: Mapping[str, Any] | None = None, paging: Paging | None = None) -> Call:
        params: dict[str, Any] = dict(filters or {})
        params.update((paging or Paging()).params())
        return Call("GET", self.collection, query=build_query(params))

    def get_call(self, entity_id: str) -> Call:
        return Call("GET", entity_path(self.collection, entity_id))

    def create_call(self, data: Mapping[str, Any]) -> Call:
        return Call("POST", self.collection, body=self.normalize(data))

    def update_call(self, entity_id: str, data: Mapping[str, Any], update_mask: Iterable[str]) -> Call:
        return Call(
            "PUT",
            entity_path(self.collection, entity_id),
            body=update_body(entity_id, self.normalize(data), update_mask),
        )

    def delete_call(self, entity_id: str) -> Call:
        return Call("DELETE", entity_path(self.collection, entity_id))

    # -- Operations --

    async def list(
        self,
        filters: Mapping[str, Any] | None = None,
        paging: Paging | None = None,
        options: RequestOptions | None = None,
    ) -> Record:
        """Return ``{"items": [...], "total": n}`` as sent by the server."""
        return await self._transport.send(self.list_call(filters, paging), options)

    async def get(self, entity_id: str, options: RequestOptions | None = None) -> Record:
        """Fetch one entity. Raises ``NotFound`` when the id is unknown."""
        return await self._transport.send(self.get_call(entity_id), options)

    async def create(self, data: Mapping[str, Any], options: RequestOptions | None = None) -> Record:
        return await self._transport.send(self.create_call(data), options)

    async def update(
        self,
        entity_id: str,
        data: Mapping[str, Any],
        update_mask: Iterable[str],
        options: RequestOptions | None = None,
    ) -> Record:
        """Apply *data* to the fields named in *update_mask* only."""
        return await self._transport.send(self.update_call(entity_id, data, update_mask), options)

    async def delete(self, entity_id: str, options: RequestOptions | None = None) -> None:
        await self._transport.send(self.delete_call(entity_id), options)
