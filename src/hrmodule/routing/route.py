"""RouteNode and RouteRecord frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class RouteNode:
    """A declarative navigation route contributed by a module.

    ``path`` is absolute when it starts with ``/``; otherwise it is
    relative to the parent's resolved path. ``component`` and
    ``redirect`` are opaque to the registration protocol, as is ``meta``
    (menu order, icon, title key, required authorities, ...).
    """

    path: str
    name: str | None = None
    children: tuple["RouteNode", ...] = ()
    meta: Mapping[str, Any] = field(default_factory=dict)
    component: str | None = None
    redirect: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    def walk(self) -> list["RouteNode"]:
        """This node followed by all descendants, depth-first."""
        nodes = [self]
        for child in self.children:
            nodes.extend(child.walk())
        return nodes


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """A route as held by the host: a node bound to its resolved path.

    ``ancestors`` lists the record keys of every enclosing route so that
    removing a route can take its whole subtree with it.
    """

    key: int
    path: str
    node: RouteNode
    owner: str | None = None
    ancestors: tuple[int, ...] = ()

    @property
    def name(self) -> str | None:
        return self.node.name

    @property
    def meta(self) -> Mapping[str, Any]:
        return self.node.meta
