"""Path resolution for nested route trees.

Examples::

    join_path("/hr", "calendar")      -> "/hr/calendar"
    join_path("/hr/", "/calendar")    -> "/calendar"      (absolute child)
    join_path("/hr/", "calendar/")    -> "/hr/calendar"
    join_path("/hr", "")              -> "/hr"
"""

import re

from hrmodule.routing.route import RouteNode

_SLASHES = re.compile(r"/{2,}")


def normalize_path(path: str) -> str:
    """Collapse repeated separators and drop any trailing slash."""
    path = _SLASHES.sub("/", "/" + path.strip())
    if len(path) > 1:
        path = path.rstrip("/")
    return path


def join_path(parent: str, child: str) -> str:
    """Resolve *child* against the resolved *parent* path."""
    if child.startswith("/"):
        return normalize_path(child)
    if not child.strip("/"):
        return normalize_path(parent)
    return normalize_path(f"{parent.rstrip('/')}/{child.lstrip('/')}")


def resolve_paths(node: RouteNode, parent_path: str = "") -> list[tuple[str, RouteNode]]:
    """Every ``(resolved_path, node)`` pair in *node*'s subtree, depth-first."""
    resolved = join_path(parent_path, node.path) if parent_path else normalize_path(node.path)
    pairs = [(resolved, node)]
    for child in node.children:
        pairs.extend(resolve_paths(child, resolved))
    return pairs


def occupied_paths(node: RouteNode, parent_path: str = "") -> set[str]:
    """The full set of absolute paths a subtree would occupy."""
    return {path for path, _ in resolve_paths(node, parent_path)}
