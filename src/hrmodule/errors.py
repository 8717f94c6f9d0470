"""hrmodule exception hierarchy.

Shared across the transport, services, stores, and the registration
protocol so every layer raises and catches the same types.
"""

from dataclasses import dataclass


class HrModuleError(Exception):
    """Base for all hrmodule-specific errors."""


class ConfigurationError(HrModuleError):
    """Raised when configuration or a module descriptor is invalid.

    Descriptors are validated at construction, so these surface at
    module load time rather than during registration.
    """


@dataclass(frozen=True, slots=True)
class TransportError(HrModuleError):
    """A non-2xx response from the remote API.

    Only the status is interpreted. The response body is kept verbatim
    in ``detail`` for diagnostics and never parsed.
    """

    status: int
    detail: str = ""
    method: str = ""
    url: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(TransportError):  # noqa: N818
    """404 — the requested entity does not exist."""

    def __init__(self, detail: str = "Not Found", *, method: str = "", url: str = "") -> None:
        super().__init__(status=404, detail=detail, method=method, url=url)


class Cancelled(HrModuleError):  # noqa: N818
    """The call was aborted through its ``CancelToken``."""


class RegistrationConflict(HrModuleError):  # noqa: N818
    """A route path is already owned by a different module.

    Only raised when registration runs in strict mode. The default mode
    resolves collisions by removing the existing route.
    """

    def __init__(self, path: str, existing: str, owner: str | None, module_id: str) -> None:
        self.path = path
        self.existing = existing
        self.owner = owner
        self.module_id = module_id
        held_by = f"module {owner!r}" if owner else "the host"
        super().__init__(
            f"Path {path!r} is held by route {existing!r} ({held_by}); "
            f"module {module_id!r} cannot mount it in strict mode"
        )


class RouteNotFound(HrModuleError, LookupError):  # noqa: N818
    """No host route is registered at the requested path or name."""
