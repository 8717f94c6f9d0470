"""Tests for hrmodule.sdk.register — the registration protocol."""

import anyio
import httpx
import pytest

from conftest import BASE_URL
from hrmodule.cancel import CancelToken
from hrmodule.config import ModuleConfig
from hrmodule.errors import Cancelled, RegistrationConflict
from hrmodule.http.transport import RequestOptions, Transport
from hrmodule.i18n import LocaleTable
from hrmodule.routing.route import RouteNode
from hrmodule.routing.router import HostRouter
from hrmodule.sdk import HostContext, ModuleDescriptor, register
from hrmodule.services import LeaveService


def _hr(version: str = "1.0.0", locales: dict | None = None) -> ModuleDescriptor:
    return ModuleDescriptor(
        id="hr",
        version=version,
        routes=(
            RouteNode(
                "/hr",
                name="Hr",
                children=(
                    RouteNode("calendar", name="HrCalendar"),
                    RouteNode("request", name="HrRequests"),
                ),
            ),
        ),
        locales=locales if locales is not None else {"en-US": {"menu": {"calendar": "Calendar"}}},
    )


def _snapshot(context: HostContext) -> list[tuple[str | None, str, str | None]]:
    return [(r.name, r.path, r.owner) for r in context.router.routes]


@pytest.fixture
def context() -> HostContext:
    return HostContext()


class TestIdempotence:
    def test_twice_equals_once(self) -> None:
        once, twice = HostContext(), HostContext()
        register(once, _hr())
        register(twice, _hr())
        register(twice, _hr())

        assert _snapshot(twice) == _snapshot(once)
        assert len(twice.router.routes) == 3

    def test_locales_same_after_reregister(self, context: HostContext) -> None:
        register(context, _hr())
        register(context, _hr())

        assert context.i18n.messages("en-US") == {"hr": {"menu": {"calendar": "Calendar"}}}

    def test_records_module_version(self, context: HostContext) -> None:
        register(context, _hr("1.0.0"))
        register(context, _hr("1.1.0"))
        assert context.modules == {"hr": "1.1.0"}


class TestCollisions:
    def test_conflicting_named_route_removed(self, context: HostContext) -> None:
        legacy = ModuleDescriptor(
            id="legacy",
            version="0.9.0",
            routes=(
                RouteNode("/hr/calendar", name="LegacyCalendar"),
                RouteNode("/timesheets", name="Timesheets"),
            ),
        )
        register(context, legacy)
        register(context, _hr())

        router = context.router
        assert not router.has("LegacyCalendar")
        assert router.has("Timesheets")
        assert router.match("/hr/calendar").name == "HrCalendar"
        assert router.match("/hr/calendar").owner == "hr"

    def test_collision_removes_whole_existing_subtree(self, context: HostContext) -> None:
        context.router.add(
            RouteNode("/hr", name="OldHr", children=(RouteNode("reports", name="OldReports"),))
        )
        register(context, _hr())

        assert not context.router.has("OldReports")

    def test_unnamed_route_survives(self, context: HostContext) -> None:
        context.router.add(RouteNode("/hr/calendar"))
        register(context, _hr())

        at_path = context.router.routes_at("/hr/calendar")
        assert [r.name for r in at_path] == [None, "HrCalendar"]

    def test_same_name_different_path_not_a_path_collision(self, context: HostContext) -> None:
        context.router.add(RouteNode("/people/calendar", name="HrCalendar"), owner="people")
        register(context, _hr())

        # The router's name replacement moves the name; no path was shared.
        assert context.router.resolve("HrCalendar") == "/hr/calendar"
        assert context.router.routes_at("/people/calendar") == []

    def test_collision_logs_warning(
        self, context: HostContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        context.router.add(RouteNode("/hr", name="Other"), owner="other")
        with caplog.at_level("WARNING", logger="hrmodule.registration"):
            register(context, _hr())
        assert "'Other'" in caplog.text

    def test_multiple_route_trees(self, context: HostContext) -> None:
        d = ModuleDescriptor(
            id="hr",
            version="1.0.0",
            routes=(RouteNode("/hr", name="Hr"), RouteNode("/settings/hr", name="HrSettings")),
        )
        register(context, d)
        register(context, d)

        assert [r.name for r in context.router.routes] == ["Hr", "HrSettings"]


class TestStrictMode:
    def test_foreign_route_raises(self, context: HostContext) -> None:
        context.router.add(RouteNode("/hr", name="LegacyHr"), owner="legacy")

        with pytest.raises(RegistrationConflict) as exc_info:
            register(context, _hr(), strict=True)

        assert exc_info.value.owner == "legacy"
        assert context.router.has("LegacyHr")
        assert not context.router.has("Hr")

    def test_own_routes_may_be_replaced(self, context: HostContext) -> None:
        register(context, _hr(), strict=True)
        register(context, _hr("1.0.1"), strict=True)
        assert len(context.router.routes) == 3

    def test_not_transactional_across_trees(self, context: HostContext) -> None:
        context.router.add(RouteNode("/b", name="Taken"), owner="other")
        d = ModuleDescriptor(
            id="hr",
            version="1.0.0",
            routes=(RouteNode("/a", name="A"), RouteNode("/b", name="B")),
        )

        with pytest.raises(RegistrationConflict):
            register(context, d, strict=True)

        assert context.router.has("A")
        assert not context.router.has("B")


class TestLocales:
    def test_second_bundle_replaces_first(self, context: HostContext) -> None:
        register(context, _hr(locales={"en-US": {"a": "A", "b": "B"}}))
        register(context, _hr(locales={"en-US": {"b": "B2"}}))

        assert context.i18n.messages("en-US")["hr"] == {"b": "B2"}

    def test_namespaced_by_module_id(self, context: HostContext) -> None:
        register(context, _hr())
        assert context.i18n.translate("hr.menu.calendar") == "Calendar"

    def test_custom_host_services(self) -> None:
        router, i18n = HostRouter(), LocaleTable("de-DE")
        context = HostContext(router=router, i18n=i18n)

        register(context, _hr(locales={"de-DE": {"menu": {"calendar": "Kalender"}}}))

        assert router.has("Hr")
        assert i18n.translate("hr.menu.calendar") == "Kalender"


class TestCancellationIsolation:
    @pytest.mark.anyio
    async def test_cancelled_get_leaves_context_alone(self, context: HostContext) -> None:
        register(context, _hr())
        before = (_snapshot(context), dict(context.i18n.messages("en-US")))
        started = anyio.Event()

        async def slow(request: httpx.Request) -> httpx.Response:
            started.set()
            await anyio.sleep(30)
            return httpx.Response(200, json={})

        service = LeaveService(
            Transport(ModuleConfig(base_url=BASE_URL), http_transport=httpx.MockTransport(slow))
        )
        token = CancelToken()
        outcome: list[BaseException] = []

        async def call() -> None:
            try:
                await service.get("lr-1", RequestOptions(cancel=token))
            except Cancelled as exc:
                outcome.append(exc)

        with anyio.fail_after(5):
            async with anyio.create_task_group() as tg:
                tg.start_soon(call)
                await started.wait()
                token.cancel()

        assert len(outcome) == 1
        assert (_snapshot(context), dict(context.i18n.messages("en-US"))) == before
