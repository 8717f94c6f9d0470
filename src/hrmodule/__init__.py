"""hrmodule — HR leave management as a pluggable shell module.

Contributes routes, state facades and localized messages for absence
types, leave requests and allowances to a multi-tenant admin shell, and
talks to the HR API through an authenticated JSON transport.

Basic usage::

    from hrmodule import HostContext, ModuleConfig, Transport, create_module, register

    config = ModuleConfig(base_url="https://shell.example.com")
    transport = Transport(config, token_provider=lambda: access_token)
    descriptor = create_module(transport)

    context = HostContext()
    register(context, descriptor)

    leave = descriptor.store("hr-leave")
    page = await leave.list_leave_requests(Paging(page=1, page_size=20))
"""

__version__ = "1.0.0"
__all__ = [
    "CancelToken",
    "Cancelled",
    "ConfigurationError",
    "HostContext",
    "HrModuleError",
    "ModuleConfig",
    "ModuleDescriptor",
    "NotFound",
    "Paging",
    "RegistrationConflict",
    "RouteNode",
    "Transport",
    "TransportError",
    "create_module",
    "register",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hrmodule`` fast while providing a clean top-level API.
    """
    if name == "CancelToken":
        from hrmodule.cancel import CancelToken

        return CancelToken

    if name == "ModuleConfig":
        from hrmodule.config import ModuleConfig

        return ModuleConfig

    if name == "Paging":
        from hrmodule.http.query import Paging

        return Paging

    if name == "Transport":
        from hrmodule.http.transport import Transport

        return Transport

    if name == "RouteNode":
        from hrmodule.routing.route import RouteNode

        return RouteNode

    if name in ("HostContext", "ModuleDescriptor", "register"):
        from hrmodule import sdk as _sdk

        return getattr(_sdk, name)

    if name == "create_module":
        from hrmodule.module import create_module

        return create_module

    if name in (
        "Cancelled",
        "ConfigurationError",
        "HrModuleError",
        "NotFound",
        "RegistrationConflict",
        "TransportError",
    ):
        from hrmodule import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
