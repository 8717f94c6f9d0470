"""Field-mask partial updates.

Every entity update carries a partial record plus an explicit list of
the field names the server is allowed to modify. Fields missing from the
mask are left untouched server-side even when present in the payload.

The mask travels as a single comma-joined string. It is not validated
against the record here; enforcing it is the server's half of the
contract.
"""

from collections.abc import Iterable, Mapping
from typing import Any


def join_mask(fields: Iterable[str]) -> str:
    """Join mask entries into the wire form, preserving caller order.

    Duplicate entries are dropped (first occurrence wins). Entries must
    be non-empty and must not contain the separator.
    """
    seen: dict[str, None] = {}
    for field in fields:
        if not field or "," in field:
            msg = f"Invalid field mask entry: {field!r}"
            raise ValueError(msg)
        seen.setdefault(field, None)
    return ",".join(seen)


def update_body(entity_id: str, data: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Build the ``PUT`` body for an update call.

    ``update_body("at-1", {"name": "X", "color": "Y"}, ["name"])``
    gives ``{"id": "at-1", "data": {...}, "updateMask": "name"}``.
    """
    return {
        "id": entity_id,
        "data": dict(data),
        "updateMask": join_mask(fields),
    }


def changed_fields(original: Mapping[str, Any], edited: Mapping[str, Any]) -> list[str]:
    """Return the fields of *edited* whose value differs from *original*.

    Order follows *edited*. Useful for deriving a mask from a form that
    was pre-filled with a fetched record.
    """
    missing = object()
    return [key for key, value in edited.items() if original.get(key, missing) != value]
