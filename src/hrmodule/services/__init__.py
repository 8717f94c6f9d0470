"""Entity services — one per entity family.

Each service maps typed parameters to a ``Call`` and hands it to the
shared ``Transport``. Services hold no state besides the transport and
never catch errors.
"""

from hrmodule.services.absence_types import AbsenceTypeService
from hrmodule.services.admin import AdminService
from hrmodule.services.allowances import AllowanceService
from hrmodule.services.base import EntityService
from hrmodule.services.leave import LeaveRequestStatus, LeaveService
from hrmodule.services.system import SystemService

__all__ = [
    "AbsenceTypeService",
    "AdminService",
    "AllowanceService",
    "EntityService",
    "LeaveRequestStatus",
    "LeaveService",
    "SystemService",
]
