"""Build a throwaway host with the HR module registered in it."""

from hrmodule.config import ModuleConfig
from hrmodule.http.transport import Transport
from hrmodule.i18n import LocaleTable
from hrmodule.module import create_module
from hrmodule.routing.router import HostRouter
from hrmodule.sdk.context import HostContext
from hrmodule.sdk.register import register


def registered_host(config: ModuleConfig, *, strict: bool = False) -> tuple[HostRouter, LocaleTable]:
    router = HostRouter()
    i18n = LocaleTable(fallback=config.locale_fallback)
    descriptor = create_module(Transport(config))
    register(
        HostContext(router=router, i18n=i18n),
        descriptor,
        strict=strict or config.strict_registration,
    )
    return router, i18n
