from hrmodule.cancel import CancelToken
from hrmodule.services.base import Record
from hrmodule.services.system import SystemService
from hrmodule.stores.base import Store, call_options


class SystemStore(Store):
    name = "hr-system"

    __slots__ = ("_service",)

    def __init__(self, service: SystemService) -> None:
        self._service = service

    async def get_stats(self, cancel: CancelToken | None = None) -> Record:
        return await self._service.stats(call_options(cancel))
