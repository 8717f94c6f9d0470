"""Absence types — the catalogue of leave categories (vacation, sick, ...)."""

from hrmodule.services.base import EntityService


class AbsenceTypeService(EntityService):
    """CRUD over ``/absence-types``. List filter: ``query`` (free text)."""

    collection = "/absence-types"
    envelope = "absenceType"

    __slots__ = ()
