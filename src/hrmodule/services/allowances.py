"""Leave allowances — yearly day budgets per user and absence type."""

from hrmodule.http.query import build_query
from hrmodule.http.transport import Call, RequestOptions
from hrmodule.services.base import EntityService, Record, entity_path


class AllowanceService(EntityService):
    """CRUD over ``/allowances`` plus per-user balance lookups.

    List filters: ``userId``, ``absenceTypeId``, ``year``.
    """

    collection = "/allowances"
    envelope = "allowance"

    __slots__ = ()

    def balance_call(self, user_id: int, year: int | None = None) -> Call:
        return Call(
            "GET",
            f"{entity_path('/users', str(user_id))}/balance",
            query=build_query({"year": year or None}),
        )

    async def user_balance(
        self,
        user_id: int,
        year: int | None = None,
        options: RequestOptions | None = None,
    ) -> Record:
        """Return ``{"userId", "year", "entries": [...]}``; year defaults server-side."""
        return await self.transport.send(self.balance_call(user_id, year), options)
