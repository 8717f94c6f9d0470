"""State facades — the call shapes presentation code uses.

Each store adapts one service to two conventions:

- lists take ``(paging, form)`` where *form* is the raw filter-form dict
- updates take ``(id, data, update_mask)`` where the mask is a list of
  field names

Stores keep no state. Every call passes straight through to the service
and returns its result or raises its error unchanged. ``reset()`` exists
for lifecycle symmetry with stateful stores and does nothing.
"""

from hrmodule.stores.absence_type import AbsenceTypeStore
from hrmodule.stores.allowance import AllowanceStore
from hrmodule.stores.base import Store
from hrmodule.stores.leave import LeaveStore
from hrmodule.stores.system import SystemStore

__all__ = ["AbsenceTypeStore", "AllowanceStore", "LeaveStore", "Store", "SystemStore"]
