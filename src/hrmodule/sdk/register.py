"""Registration protocol — merging a module descriptor into a host.

For each top-level route tree of the descriptor:

1. Compute every absolute path the tree would occupy.
2. Remove each *named* host route already resolving to one of those
   paths (together with its subtree).
3. Add the tree, indexed by name and resolved path.

Then, for each locale bundle, replace the host's messages under the
module's namespace with the bundle.

Re-registering the same descriptor is therefore idempotent, and an
updated version of a module replaces the old one instead of leaving a
live route to it.

Known limitations, kept deliberately:

- Unnamed host routes cannot be removed, so an unnamed route at a
  colliding path survives next to the new one.
- Collisions are detected by path only. The same name mounted at a new
  path is handled by the router's own name replacement.
- Registration is not transactional across route trees: if one tree
  fails (e.g. a strict-mode conflict), trees mounted before it stay.
- Removing a colliding named route takes its whole subtree with it,
  including descendants at paths the new tree does not occupy. A host
  route ``/hr`` with a child ``/hr/legacy`` loses both when a module
  mounts ``/hr``, even though nothing new lands at ``/hr/legacy``.
"""

import logging

from hrmodule.errors import RegistrationConflict
from hrmodule.routing.paths import occupied_paths
from hrmodule.routing.route import RouteNode
from hrmodule.sdk.context import HostContext, Router
from hrmodule.sdk.descriptor import ModuleDescriptor

logger = logging.getLogger("hrmodule.registration")


def _mount(router: Router, root: RouteNode, module_id: str, *, strict: bool) -> None:
    paths = occupied_paths(root)
    colliding = [record for record in router.routes if record.path in paths]

    if strict:
        for record in colliding:
            if record.owner != module_id:
                raise RegistrationConflict(
                    record.path, record.name or "<unnamed>", record.owner, module_id
                )

    for record in colliding:
        if record.name is None:
            logger.warning(
                "Unnamed route at %r cannot be removed; it stays alongside module %r",
                record.path,
                module_id,
            )
            continue
        if not router.remove(record.name):
            # Already gone with a removed ancestor.
            continue
        if record.owner == module_id:
            logger.debug("Re-mounting %r at %r for module %r", record.name, record.path, module_id)
        else:
            logger.warning(
                "Route %r at %r (owner %r) replaced by module %r",
                record.name,
                record.path,
                record.owner,
                module_id,
            )

    router.add(root, owner=module_id)


def register(context: HostContext, descriptor: ModuleDescriptor, *, strict: bool = False) -> None:
    """Merge *descriptor*'s routes and messages into *context*.

    In the default mode, path collisions are resolved silently by
    removing the existing named routes. With ``strict=True`` a collision
    with a route owned by another module (or by the host) raises
    ``RegistrationConflict`` before that route tree is touched.
    """
    for root in descriptor.routes:
        _mount(context.router, root, descriptor.id, strict=strict)

    for tag, bundle in descriptor.locales.items():
        context.i18n.merge_locale_message(tag, {descriptor.id: bundle})
        logger.debug("Merged %s messages for module %r", tag, descriptor.id)

    previous = context.modules.get(descriptor.id)
    context.modules[descriptor.id] = descriptor.version
    if previous is None:
        logger.info("Registered module %r %s", descriptor.id, descriptor.version)
    else:
        logger.info(
            "Re-registered module %r (%s -> %s)", descriptor.id, previous, descriptor.version
        )
