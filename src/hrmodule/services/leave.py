"""Leave requests and the team calendar.

Besides CRUD, leave requests move through review transitions
(approve, reject, cancel). Which transitions are legal from which
status is decided by the server; the client only sends the request.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from hrmodule.dates import to_timestamp
from hrmodule.http.query import Paging, build_query
from hrmodule.http.transport import Call, RequestOptions
from hrmodule.services.base import EntityService, Record, entity_path

DATE_FIELDS = ("startDate", "endDate")


class LeaveRequestStatus(StrEnum):
    UNSPECIFIED = "LEAVE_REQUEST_STATUS_UNSPECIFIED"
    PENDING = "LEAVE_REQUEST_STATUS_PENDING"
    APPROVED = "LEAVE_REQUEST_STATUS_APPROVED"
    REJECTED = "LEAVE_REQUEST_STATUS_REJECTED"
    CANCELLED = "LEAVE_REQUEST_STATUS_CANCELLED"
    AWAITING_SIGNING = "LEAVE_REQUEST_STATUS_AWAITING_SIGNING"


def _with_timestamps(data: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(data)
    for key in DATE_FIELDS:
        if key in out and isinstance(out[key], str):
            out[key] = to_timestamp(out[key])
    return out


class LeaveService(EntityService):
    """Leave requests under ``/leave-requests`` plus ``/calendar``.

    List filters: ``userId``, ``status`` (one value or a sequence),
    ``startDate``, ``endDate``. Date-only values are widened to
    midnight-UTC timestamps in filters and payloads alike.
    """

    collection = "/leave-requests"
    envelope = "leaveRequest"

    __slots__ = ()

    def normalize(self, data: Mapping[str, Any]) -> Record:
        return _with_timestamps(data)

    def list_call(self, filters: Mapping[str, Any] | None = None, paging: Paging | None = None) -> Call:
        return super().list_call(_with_timestamps(filters or {}), paging)

    # -- Review transitions --

    def approve_call(
        self,
        entity_id: str,
        review_notes: str | None = None,
        approver_email: str | None = None,
        approver_name: str | None = None,
    ) -> Call:
        body = {
            "reviewNotes": review_notes,
            "approverEmail": approver_email,
            "approverName": approver_name,
        }
        return Call(
            "POST",
            f"{entity_path(self.collection, entity_id)}/approve",
            body={k: v for k, v in body.items() if v is not None},
        )

    def reject_call(self, entity_id: str, review_notes: str | None = None) -> Call:
        body = {} if review_notes is None else {"reviewNotes": review_notes}
        return Call("POST", f"{entity_path(self.collection, entity_id)}/reject", body=body)

    def cancel_call(self, entity_id: str) -> Call:
        return Call("POST", f"{entity_path(self.collection, entity_id)}/cancel")

    def calendar_call(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
        org_unit_name: str | None = None,
        user_id: int | None = None,
    ) -> Call:
        params = _with_timestamps(
            {
                "startDate": start_date,
                "endDate": end_date,
                "orgUnitName": org_unit_name,
                "userId": user_id,
            }
        )
        return Call("GET", "/calendar", query=build_query(params))

    async def approve(
        self,
        entity_id: str,
        review_notes: str | None = None,
        approver_email: str | None = None,
        approver_name: str | None = None,
        options: RequestOptions | None = None,
    ) -> Record:
        call = self.approve_call(entity_id, review_notes, approver_email, approver_name)
        return await self.transport.send(call, options)

    async def reject(
        self,
        entity_id: str,
        review_notes: str | None = None,
        options: RequestOptions | None = None,
    ) -> Record:
        return await self.transport.send(self.reject_call(entity_id, review_notes), options)

    async def cancel(self, entity_id: str, options: RequestOptions | None = None) -> Record:
        return await self.transport.send(self.cancel_call(entity_id), options)

    async def calendar_events(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
        org_unit_name: str | None = None,
        user_id: int | None = None,
        options: RequestOptions | None = None,
    ) -> Record:
        """Return ``{"events": [...]}`` for the requested window."""
        call = self.calendar_call(start_date, end_date, org_unit_name, user_id)
        return await self.transport.send(call, options)
