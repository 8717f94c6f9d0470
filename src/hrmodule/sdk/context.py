"""Host registration context and the host services modules rely on.

The registration protocol only needs two host services: a router that
can add, remove and enumerate routes, and an i18n table that can merge
messages. Both are structural protocols so a host can plug in its own
implementations; ``HostRouter`` and ``LocaleTable`` are the defaults.

Contexts are explicit values. Nothing here is process-global, so
several hosts (one per test, say) can coexist.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from hrmodule.i18n import LocaleTable
from hrmodule.routing.route import RouteNode, RouteRecord
from hrmodule.routing.router import HostRouter


@runtime_checkable
class Router(Protocol):
    """Mutable host route table."""

    @property
    def routes(self) -> list[RouteRecord]: ...
    def add(
        self, node: RouteNode, *, parent_path: str = "", owner: str | None = None
    ) -> list[RouteRecord]: ...
    def remove(self, name: str) -> bool: ...


@runtime_checkable
class I18n(Protocol):
    """Host message table."""

    def merge_locale_message(self, tag: str, messages: Mapping[str, Any]) -> None: ...


@dataclass(slots=True)
class HostContext:
    """The shell's live route and locale tables.

    Mutated only through ``register``. Registration calls against one
    context must be serialized by the caller.
    """

    router: Router = field(default_factory=HostRouter)
    i18n: I18n = field(default_factory=LocaleTable)
    modules: dict[str, str] = field(default_factory=dict)
