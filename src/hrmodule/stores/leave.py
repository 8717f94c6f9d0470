from typing import Any

from hrmodule.cancel import CancelToken
from hrmodule.http.query import Paging
from hrmodule.services.base import Record
from hrmodule.services.leave import LeaveService
from hrmodule.stores.base import FormValues, Store, call_options, pick


class LeaveStore(Store):
    """Leave requests, review transitions, and the calendar."""

    name = "hr-leave"

    __slots__ = ("_service",)

    def __init__(self, service: LeaveService) -> None:
        self._service = service

    async def list_leave_requests(
        self,
        paging: Paging | None = None,
        form: FormValues = None,
        cancel: CancelToken | None = None,
    ) -> Record:
        filters = pick(form, "userId", "status", "startDate", "endDate")
        return await self._service.list(filters, paging, call_options(cancel))

    async def get_leave_request(self, entity_id: str, cancel: CancelToken | None = None) -> Record:
        return await self._service.get(entity_id, call_options(cancel))

    async def create_leave_request(self, data: dict[str, Any], cancel: CancelToken | None = None) -> Record:
        return await self._service.create(data, call_options(cancel))

    async def update_leave_request(
        self,
        entity_id: str,
        data: dict[str, Any],
        update_mask: list[str],
        cancel: CancelToken | None = None,
    ) -> Record:
        return await self._service.update(entity_id, data, update_mask, call_options(cancel))

    async def delete_leave_request(self, entity_id: str, cancel: CancelToken | None = None) -> None:
        await self._service.delete(entity_id, call_options(cancel))

    async def approve_leave_request(
        self,
        entity_id: str,
        review_notes: str | None = None,
        approver_email: str | None = None,
        approver_name: str | None = None,
        cancel: CancelToken | None = None,
    ) -> Record:
        return await self._service.approve(
            entity_id, review_notes, approver_email, approver_name, call_options(cancel)
        )

    async def reject_leave_request(
        self,
        entity_id: str,
        review_notes: str | None = None,
        cancel: CancelToken | None = None,
    ) -> Record:
        return await self._service.reject(entity_id, review_notes, call_options(cancel))

    async def cancel_leave_request(self, entity_id: str, cancel: CancelToken | None = None) -> Record:
        return await self._service.cancel(entity_id, call_options(cancel))

    async def get_calendar_events(
        self,
        params: FormValues = None,
        cancel: CancelToken | None = None,
    ) -> Record:
        """``params`` uses the wire names: startDate, endDate, orgUnitName, userId."""
        window = pick(params, "startDate", "endDate", "orgUnitName", "userId")
        return await self._service.calendar_events(
            window["startDate"],
            window["endDate"],
            window["orgUnitName"],
            window["userId"],
            call_options(cancel),
        )
