"""Host route table indexed by name and by resolved path.

Unlike a compiled request router, the host table stays mutable for the
whole lifetime of the shell: modules add and remove subtrees at runtime
(initial load, hot reload, re-mount).
"""

import itertools
import logging

from hrmodule.errors import RouteNotFound
from hrmodule.routing.paths import normalize_path, resolve_paths
from hrmodule.routing.route import RouteNode, RouteRecord

logger = logging.getLogger("hrmodule.router")


class HostRouter:
    """Live route table of the host application.

    Usage::

        router = HostRouter()
        router.add(RouteNode("/hr", name="Hr", children=(RouteNode("calendar", name="HrCalendar"),)))
        router.match("/hr/calendar").name   # "HrCalendar"
        router.remove("Hr")                 # removes the whole subtree

    Names are unique: adding a route whose name is already registered
    replaces the old route (and its descendants). Paths are not: several
    records may resolve to the same path, in which case ``match`` returns
    the most recently added one.
    """

    __slots__ = ("_by_name", "_by_path", "_keys", "_records")

    def __init__(self) -> None:
        self._records: dict[int, RouteRecord] = {}
        self._by_name: dict[str, RouteRecord] = {}
        self._by_path: dict[str, list[RouteRecord]] = {}
        self._keys = itertools.count(1)

    def add(self, node: RouteNode, *, parent_path: str = "", owner: str | None = None) -> list[RouteRecord]:
        """Add *node* and its full subtree. Returns the new records, parents first."""
        added: list[RouteRecord] = []
        lineage: dict[int, tuple[int, ...]] = {}
        parent_key_of: dict[int, int | None] = {id(node): None}

        for path, current in resolve_paths(node, parent_path):
            if current.name is not None and current.name in self._by_name:
                logger.debug("Replacing route named %r", current.name)
                self.remove(current.name)

            parent_key = parent_key_of[id(current)]
            ancestors = () if parent_key is None else (*lineage[parent_key], parent_key)
            record = RouteRecord(
                key=next(self._keys),
                path=path,
                node=current,
                owner=owner,
                ancestors=ancestors,
            )
            lineage[record.key] = ancestors
            for child in current.children:
                parent_key_of[id(child)] = record.key

            self._records[record.key] = record
            if record.name is not None:
                self._by_name[record.name] = record
            self._by_path.setdefault(path, []).append(record)
            added.append(record)

        return added

    def remove(self, name: str) -> bool:
        """Remove the route named *name* with all its descendants.

        Returns ``False`` when no route has that name.
        """
        record = self._by_name.get(name)
        if record is None:
            return False

        doomed = [record] + [r for r in self._records.values() if record.key in r.ancestors]
        for r in doomed:
            del self._records[r.key]
            if r.name is not None and self._by_name.get(r.name) is r:
                del self._by_name[r.name]
            at_path = self._by_path[r.path]
            at_path.remove(r)
            if not at_path:
                del self._by_path[r.path]
        return True

    @property
    def routes(self) -> list[RouteRecord]:
        """All records in insertion order."""
        return list(self._records.values())

    def get(self, name: str) -> RouteRecord | None:
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        return name in self._by_name

    def routes_at(self, path: str) -> list[RouteRecord]:
        """Every record resolving to *path*, oldest first."""
        return list(self._by_path.get(normalize_path(path), ()))

    def match(self, path: str) -> RouteRecord:
        """Return the most recently added record at *path*.

        Raises ``RouteNotFound`` if nothing is registered there.
        """
        records = self._by_path.get(normalize_path(path))
        if not records:
            raise RouteNotFound(f"No route matches {path!r}")
        return records[-1]

    def resolve(self, name: str) -> str:
        """Resolved path of the route named *name*."""
        record = self._by_name.get(name)
        if record is None:
            raise RouteNotFound(f"No route named {name!r}")
        return record.path

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name
