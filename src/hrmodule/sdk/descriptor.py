"""Module descriptor — the single artifact a feature module gives the host.

A descriptor bundles the module's identity, its route trees, its named
state facades and its per-locale message bundles. It is validated on
construction and immutable afterwards.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from hrmodule.errors import ConfigurationError
from hrmodule.routing.paths import join_path, normalize_path
from hrmodule.routing.route import RouteNode

_MODULE_ID = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")
_SEMVER = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"
)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def _check_siblings(siblings: tuple[RouteNode, ...], parent_path: str, module_id: str) -> None:
    seen: dict[str, RouteNode] = {}
    for node in siblings:
        path = join_path(parent_path, node.path) if parent_path else normalize_path(node.path)
        if path in seen:
            msg = (
                f"Module {module_id!r}: sibling routes {seen[path].name or seen[path].path!r} "
                f"and {node.name or node.path!r} both resolve to {path!r}"
            )
            raise ConfigurationError(msg)
        seen[path] = node
        _check_siblings(node.children, path, module_id)


@dataclass(frozen=True, slots=True)
class ModuleDescriptor:
    """Everything one feature module contributes to the host.

    Usage::

        descriptor = ModuleDescriptor(
            id="hr",
            version="1.0.0",
            routes=(RouteNode("/hr", name="Hr", children=(...)),),
            stores={"hr-leave": leave_store},
            locales={"en-US": {"menu": {"calendar": "Calendar"}}},
        )

    Raises ``ConfigurationError`` for an empty or malformed id, a
    non-semver version, duplicate route names, or sibling routes that
    resolve to the same absolute path.
    """

    id: str
    version: str
    routes: tuple[RouteNode, ...] = ()
    stores: Mapping[str, Any] = field(default_factory=dict)
    locales: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not _MODULE_ID.match(self.id or ""):
            msg = f"Invalid module id: {self.id!r}"
            raise ConfigurationError(msg)
        if not _SEMVER.match(self.version or ""):
            msg = f"Module {self.id!r}: version {self.version!r} is not a semantic version"
            raise ConfigurationError(msg)

        routes = tuple(self.routes)
        names: set[str] = set()
        for root in routes:
            for node in root.walk():
                if node.name is None:
                    continue
                if node.name in names:
                    msg = f"Module {self.id!r}: duplicate route name {node.name!r}"
                    raise ConfigurationError(msg)
                names.add(node.name)
        _check_siblings(routes, "", self.id)

        object.__setattr__(self, "routes", routes)
        object.__setattr__(self, "stores", MappingProxyType(dict(self.stores)))
        object.__setattr__(self, "locales", _freeze(self.locales))

    def store(self, name: str) -> Any:
        """Look up a state facade by name. Raises ``KeyError`` if unknown."""
        try:
            return self.stores[name]
        except KeyError:
            msg = f"Module {self.id!r} has no store named {name!r}"
            raise KeyError(msg) from None
