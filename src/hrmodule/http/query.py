"""Query string construction for list and lookup calls.

Filters arrive as plain mappings. ``None`` and ``""`` mean "not set";
sequences become repeated parameters under the same key, never a
comma-joined value.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

QueryItems: TypeAlias = tuple[tuple[str, str], ...]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _is_unset(value: Any) -> bool:
    return value is None or value == ""


def build_query(params: Mapping[str, Any]) -> QueryItems:
    """Serialize *params* into ordered ``(key, value)`` pairs.

    Examples::

        {"query": "sick", "page": 2}           -> (("query", "sick"), ("page", "2"))
        {"status": ["PENDING", "APPROVED"]}    -> (("status", "PENDING"), ("status", "APPROVED"))
        {"query": "", "userId": None}          -> ()
        {"noPaging": True}                     -> (("noPaging", "true"),)
    """
    items: list[tuple[str, str]] = []
    for key, value in params.items():
        if _is_unset(value):
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items.extend((key, _stringify(v)) for v in value if not _is_unset(v))
        else:
            items.append((key, _stringify(value)))
    return tuple(items)


@dataclass(frozen=True, slots=True)
class Paging:
    """Page selection for list calls.

    Unset fields mean "server default", never "all records". The
    unbounded set is requested explicitly with ``no_paging=True``.
    """

    page: int | None = None
    page_size: int | None = None
    no_paging: bool = False

    def __post_init__(self) -> None:
        for name in ("page", "page_size"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or value < 1):
                msg = f"Paging.{name} must be a positive integer, got {value!r}"
                raise ValueError(msg)

    def params(self) -> dict[str, Any]:
        """Wire-named parameters; unset entries are ``None``."""
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "noPaging": True if self.no_paging else None,
        }
