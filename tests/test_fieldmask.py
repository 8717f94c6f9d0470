"""Tests for hrmodule.fieldmask — partial-update convention."""

import pytest

from hrmodule.fieldmask import changed_fields, join_mask, update_body


class TestJoinMask:
    def test_comma_joined_in_caller_order(self) -> None:
        assert join_mask(["name", "color", "isActive"]) == "name,color,isActive"

    def test_single(self) -> None:
        assert join_mask(["name"]) == "name"

    def test_empty(self) -> None:
        assert join_mask([]) == ""

    def test_duplicates_dropped(self) -> None:
        assert join_mask(["name", "color", "name"]) == "name,color"

    @pytest.mark.parametrize("entry", ["", "a,b"])
    def test_rejects_malformed_entries(self, entry: str) -> None:
        with pytest.raises(ValueError, match="field mask"):
            join_mask(["name", entry])


class TestUpdateBody:
    def test_mask_ignores_extra_payload_fields(self) -> None:
        body = update_body("at-1", {"name": "X", "color": "Y"}, ["name"])

        assert body == {"id": "at-1", "data": {"name": "X", "color": "Y"}, "updateMask": "name"}

    def test_mask_entries_not_checked_against_record(self) -> None:
        body = update_body("at-1", {"name": "X"}, ["name", "sortOrder"])
        assert body["updateMask"] == "name,sortOrder"


class TestChangedFields:
    def test_only_differences(self) -> None:
        original = {"name": "Vacation", "color": "#00f", "isActive": True}
        edited = {"name": "Holiday", "color": "#00f", "isActive": False}

        assert changed_fields(original, edited) == ["name", "isActive"]

    def test_new_fields_count_as_changed(self) -> None:
        assert changed_fields({}, {"notes": None}) == ["notes"]
