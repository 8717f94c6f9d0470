from typing import Any

from hrmodule.cancel import CancelToken
from hrmodule.http.query import Paging
from hrmodule.services.absence_types import AbsenceTypeService
from hrmodule.services.base import Record
from hrmodule.stores.base import FormValues, Store, call_options, pick


class AbsenceTypeStore(Store):
    name = "hr-absence-type"

    __slots__ = ("_service",)

    def __init__(self, service: AbsenceTypeService) -> None:
        self._service = service

    async def list_absence_types(
        self,
        paging: Paging | None = None,
        form: FormValues = None,
        cancel: CancelToken | None = None,
    ) -> Record:
        return await self._service.list(pick(form, "query"), paging, call_options(cancel))

    async def get_absence_type(self, entity_id: str, cancel: CancelToken | None = None) -> Record:
        return await self._service.get(entity_id, call_options(cancel))

    async def create_absence_type(self, data: dict[str, Any], cancel: CancelToken | None = None) -> Record:
        return await self._service.create(data, call_options(cancel))

    async def update_absence_type(
        self,
        entity_id: str,
        data: dict[str, Any],
        update_mask: list[str],
        cancel: CancelToken | None = None,
    ) -> Record:
        return await self._service.update(entity_id, data, update_mask, call_options(cancel))

    async def delete_absence_type(self, entity_id: str, cancel: CancelToken | None = None) -> None:
        await self._service.delete(entity_id, call_options(cancel))
