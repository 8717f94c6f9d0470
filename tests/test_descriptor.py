"""Tests for hrmodule.sdk.descriptor — validation and immutability."""

import pytest

from hrmodule.errors import ConfigurationError
from hrmodule.routing.route import RouteNode
from hrmodule.sdk.descriptor import ModuleDescriptor


class TestValidation:
    def test_minimal(self) -> None:
        d = ModuleDescriptor(id="hr", version="1.0.0")
        assert d.routes == ()
        assert dict(d.locales) == {}

    @pytest.mark.parametrize("module_id", ["", "1hr", "hr.v2", "h r"])
    def test_bad_id(self, module_id: str) -> None:
        with pytest.raises(ConfigurationError, match="module id"):
            ModuleDescriptor(id=module_id, version="1.0.0")

    @pytest.mark.parametrize("version", ["1.0", "v1.0.0", "latest"])
    def test_bad_version(self, version: str) -> None:
        with pytest.raises(ConfigurationError, match="semantic version"):
            ModuleDescriptor(id="hr", version=version)

    @pytest.mark.parametrize("version", ["0.1.0", "2.3.4-rc.1", "1.0.0+build.5"])
    def test_good_version(self, version: str) -> None:
        assert ModuleDescriptor(id="hr", version=version).version == version

    def test_sibling_path_clash(self) -> None:
        routes = (
            RouteNode("/hr", name="Hr", children=(RouteNode("calendar", name="A"), RouteNode("calendar/", name="B"))),
        )
        with pytest.raises(ConfigurationError, match="/hr/calendar"):
            ModuleDescriptor(id="hr", version="1.0.0", routes=routes)

    def test_top_level_clash(self) -> None:
        routes = (RouteNode("/hr", name="A"), RouteNode("hr", name="B"))
        with pytest.raises(ConfigurationError, match="both resolve"):
            ModuleDescriptor(id="hr", version="1.0.0", routes=routes)

    def test_same_path_at_different_levels_allowed(self) -> None:
        routes = (RouteNode("/hr", name="Hr", children=(RouteNode("", name="HrIndex"),)),)
        assert len(ModuleDescriptor(id="hr", version="1.0.0", routes=routes).routes) == 1

    def test_duplicate_names(self) -> None:
        routes = (RouteNode("/a", name="X"), RouteNode("/b", children=(RouteNode("c", name="X"),)))
        with pytest.raises(ConfigurationError, match="duplicate route name"):
            ModuleDescriptor(id="hr", version="1.0.0", routes=routes)


class TestImmutability:
    def test_frozen(self) -> None:
        d = ModuleDescriptor(id="hr", version="1.0.0")
        with pytest.raises(AttributeError):
            d.version = "2.0.0"  # type: ignore[misc]

    def test_routes_become_tuple(self) -> None:
        d = ModuleDescriptor(id="hr", version="1.0.0", routes=[RouteNode("/hr")])  # type: ignore[arg-type]
        assert isinstance(d.routes, tuple)

    def test_locales_read_only(self) -> None:
        source = {"en-US": {"menu": {"calendar": "Calendar"}}}
        d = ModuleDescriptor(id="hr", version="1.0.0", locales=source)

        source["en-US"]["menu"]["calendar"] = "Changed"

        assert d.locales["en-US"]["menu"]["calendar"] == "Calendar"
        with pytest.raises(TypeError):
            d.locales["en-US"]["menu"]["calendar"] = "X"  # type: ignore[index]

    def test_store_lookup(self) -> None:
        store = object()
        d = ModuleDescriptor(id="hr", version="1.0.0", stores={"hr-leave": store})

        assert d.store("hr-leave") is store
        with pytest.raises(KeyError, match="hr-nope"):
            d.store("hr-nope")
