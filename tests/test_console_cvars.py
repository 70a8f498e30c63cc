from __future__ import annotations

import pytest

from qconsole.console.cvars import CvarRegistry
from qconsole.console.errors import DuplicateNameError, ParseFailureError, UnknownVariableError


def test_register_get_set() -> None:
    cvars = CvarRegistry()
    cvars.register("fov", "90")
    assert cvars.get("fov") == "90"

    cvars.set_value("fov", "110")
    assert cvars.get("fov") == "110"
    assert cvars.get_value("fov") == 110.0

    with pytest.raises(UnknownVariableError):
        cvars.get_value("nonexistent")
    with pytest.raises(UnknownVariableError):
        cvars.set_value("nonexistent", "1")


def test_registration_variants_fix_flags() -> None:
    cvars = CvarRegistry()
    cvars.register("plain", "0")
    cvars.register_archive("arch", "1")
    cvars.register_updateinfo("inf", "2")
    cvars.register_archive_updateinfo("both", "3")

    assert list(cvars.list()) == [
        ("arch", "1", True, False),
        ("both", "3", True, True),
        ("inf", "2", False, True),
        ("plain", "0", False, False),
    ]


def test_duplicate_registration_is_rejected_across_variants() -> None:
    cvars = CvarRegistry()
    cvars.register_archive("sensitivity", "3")
    cvars.set_value("sensitivity", "5")

    with pytest.raises(DuplicateNameError):
        cvars.register("sensitivity", "1")
    with pytest.raises(DuplicateNameError):
        cvars.register_archive_updateinfo("sensitivity", "1")

    entry = cvars.get_cvar("sensitivity")
    assert (entry.value, entry.default, entry.archive, entry.info) == ("5", "3", True, False)


def test_get_value_parse_failure_is_distinct_from_unknown() -> None:
    cvars = CvarRegistry()
    cvars.register("_cl_name", "player")

    with pytest.raises(ParseFailureError):
        cvars.get_value("_cl_name")
    with pytest.raises(ParseFailureError):
        cvars.get_value("_cl_name", int)
    assert cvars.get_value("_cl_name", str) == "player"


def test_get_value_scalar_types() -> None:
    cvars = CvarRegistry()
    cvars.register("cl_upspeed", "200")
    cvars.register("lookspring", "1")
    assert cvars.get_value("cl_upspeed", int) == 200
    assert cvars.get_value("cl_upspeed", float) == 200.0
    assert cvars.get_value("lookspring", bool) is True


def test_reset_restores_default() -> None:
    cvars = CvarRegistry()
    cvars.register("volume", "0.7")
    cvars.set_value("volume", "0.2")
    cvars.reset("volume")
    assert cvars.get("volume") == "0.7"


def test_info_changes_are_observable() -> None:
    cvars = CvarRegistry()
    cvars.register_updateinfo("rate", "2500")
    cvars.register_archive_updateinfo("_cl_name", "player")
    cvars.register("fov", "90")
    seen: list[tuple[str, str]] = []
    cvars.add_info_listener(lambda name, value: seen.append((name, value)))

    cvars.set_value("fov", "100")
    assert seen == []
    assert cvars.drain_info_changes() == []

    cvars.set_value("_cl_name", "ranger")
    cvars.set_value("rate", "9999")
    cvars.set_value("_cl_name", "ranger2")
    assert seen == [("_cl_name", "ranger"), ("rate", "9999"), ("_cl_name", "ranger2")]
    assert cvars.drain_info_changes() == ["_cl_name", "rate"]
    assert cvars.drain_info_changes() == []


def test_info_string_contains_only_info_cvars() -> None:
    cvars = CvarRegistry()
    cvars.register_updateinfo("rate", "2500")
    cvars.register_archive_updateinfo("_cl_name", "player")
    cvars.register_archive("sensitivity", "3")
    assert cvars.info_string() == "\\_cl_name\\player\\rate\\2500"


def test_archived_yields_archive_entries_sorted() -> None:
    cvars = CvarRegistry()
    cvars.register_archive("volume", "0.7")
    cvars.register("fov", "90")
    cvars.register_archive_updateinfo("_cl_color", "0")
    assert list(cvars.archived()) == [("_cl_color", "0"), ("volume", "0.7")]


def test_failing_info_listener_does_not_block_the_write() -> None:
    cvars = CvarRegistry()
    cvars.register_updateinfo("_cl_name", "player")
    seen: list[str] = []

    def _broken(_name: str, _value: str) -> None:
        raise RuntimeError("net down")

    cvars.add_info_listener(_broken)
    cvars.add_info_listener(lambda name, value: seen.append(value))

    cvars.set_value("_cl_name", "ranger")

    assert cvars.get("_cl_name") == "ranger"
    assert seen == ["ranger"]
    assert cvars.drain_info_changes() == ["_cl_name"]
