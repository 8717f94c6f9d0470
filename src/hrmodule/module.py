"""The HR leave-management module.

Builds the descriptor the shell loads: the ``/hr`` navigation tree, the
four state facades wired to one shared transport, and the bundled
message catalogues.

Usage::

    transport = Transport(config, token_provider=credentials.access_token)
    descriptor = create_module(transport)
    install(context, descriptor, config)
"""

import json
from pathlib import Path
from typing import Any

from hrmodule import __version__
from hrmodule.config import ModuleConfig
from hrmodule.http.transport import Transport
from hrmodule.routing.route import RouteNode
from hrmodule.sdk.context import HostContext
from hrmodule.sdk.descriptor import ModuleDescriptor
from hrmodule.sdk.register import register
from hrmodule.services import AbsenceTypeService, AllowanceService, LeaveService, SystemService
from hrmodule.stores import AbsenceTypeStore, AllowanceStore, LeaveStore, SystemStore

MODULE_ID = "hr"
LOCALES_DIR = Path(__file__).parent / "locales"

_AUTHORITY = ("platform:admin", "tenant:manager")


def _page(path: str, name: str, icon: str, title: str, component: str) -> RouteNode:
    return RouteNode(
        path=path,
        name=name,
        component=component,
        meta={"icon": icon, "title": f"{MODULE_ID}.{title}", "authority": _AUTHORITY},
    )


ROUTES: tuple[RouteNode, ...] = (
    RouteNode(
        path="/hr",
        name="Hr",
        component="shell/app-layout",
        redirect="/hr/calendar",
        meta={
            "order": 2040,
            "icon": "lucide:calendar-days",
            "title": f"{MODULE_ID}.menu.moduleName",
            "keepAlive": True,
            "authority": _AUTHORITY,
        },
        children=(
            _page("calendar", "HrCalendar", "lucide:calendar", "menu.calendar", "views/calendar"),
            _page("request", "HrRequests", "lucide:clock", "menu.requests", "views/request"),
            _page(
                "absence-type",
                "HrAbsenceTypes",
                "lucide:list",
                "menu.absenceTypes",
                "views/absence-type",
            ),
        ),
    ),
)


def load_locales(directory: Path = LOCALES_DIR) -> dict[str, dict[str, Any]]:
    """Read every ``<tag>.json`` catalogue in *directory*, keyed by tag."""
    return {
        file.stem: json.loads(file.read_text(encoding="utf-8"))
        for file in sorted(directory.glob("*.json"))
    }


def create_module(transport: Transport) -> ModuleDescriptor:
    """Build the HR descriptor with stores bound to *transport*."""
    stores = (
        AbsenceTypeStore(AbsenceTypeService(transport)),
        LeaveStore(LeaveService(transport)),
        AllowanceStore(AllowanceService(transport)),
        SystemStore(SystemService(transport)),
    )
    return ModuleDescriptor(
        id=MODULE_ID,
        version=__version__,
        routes=ROUTES,
        stores={store.name: store for store in stores},
        locales=load_locales(),
    )


def install(
    context: HostContext,
    descriptor: ModuleDescriptor,
    config: ModuleConfig | None = None,
) -> None:
    """Register *descriptor* using the strictness from *config*."""
    config = config or ModuleConfig()
    register(context, descriptor, strict=config.strict_registration)
