from typing import Any

from hrmodule.cancel import CancelToken
from hrmodule.http.query import Paging
from hrmodule.services.allowances import AllowanceService
from hrmodule.services.base import Record
from hrmodule.stores.base import FormValues, Store, call_options, pick


class AllowanceStore(Store):
    name = "hr-allowance"

    __slots__ = ("_service",)

    def __init__(self, service: AllowanceService) -> None:
        self._service = service

    async def list_allowances(
        self,
        paging: Paging | None = None,
        form: FormValues = None,
        cancel: CancelToken | None = None,
    ) -> Record:
        filters = pick(form, "userId", "absenceTypeId", "year")
        return await self._service.list(filters, paging, call_options(cancel))

    async def get_allowance(self, entity_id: str, cancel: CancelToken | None = None) -> Record:
        return await self._service.get(entity_id, call_options(cancel))

    async def create_allowance(self, data: dict[str, Any], cancel: CancelToken | None = None) -> Record:
        return await self._service.create(data, call_options(cancel))

    async def update_allowance(
        self,
        entity_id: str,
        data: dict[str, Any],
        update_mask: list[str],
        cancel: CancelToken | None = None,
    ) -> Record:
        return await self._service.update(entity_id, data, update_mask, call_options(cancel))

    async def delete_allowance(self, entity_id: str, cancel: CancelToken | None = None) -> None:
        await self._service.delete(entity_id, call_options(cancel))

    async def get_user_balance(
        self,
        user_id: int,
        year: int | None = None,
        cancel: CancelToken | None = None,
    ) -> Record:
        return await self._service.user_balance(user_id, year, call_options(cancel))
