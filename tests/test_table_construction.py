from __future__ import annotations

import enum
import logging
import warnings

import pytest

from pyvehiclehash import (
    DuplicateHashWarning,
    HistoricalAlias,
    VehicleIdentifierTable,
    VehicleTableConfig,
    VehicleTableError,
    VehicleTypeEntry,
)


def test_accepts_pairs_and_models() -> None:
    table = VehicleIdentifierTable([("Alpha", 1), VehicleTypeEntry(name="Beta", hash=2)])
    assert table.lookup("Alpha") == 1
    assert table.lookup("Beta") == 2
    assert [e.name for e in table] == ["Alpha", "Beta"]


def test_duplicate_name_rejected() -> None:
    with pytest.raises(VehicleTableError, match="duplicate symbolic name 'Alpha'"):
        VehicleIdentifierTable([("Alpha", 1), ("Alpha", 2)])


def test_case_only_difference_rejected() -> None:
    with pytest.raises(VehicleTableError, match="only by case"):
        VehicleIdentifierTable([("Alpha", 1), ("ALPHA", 2)])


@pytest.mark.parametrize("value", [-1, 2**32])
def test_out_of_range_hash_rejected(value: int) -> None:
    with pytest.raises(VehicleTableError, match="invalid entry"):
        VehicleIdentifierTable([("Alpha", value)])


def test_boundary_hashes_accepted() -> None:
    table = VehicleIdentifierTable([("Low", 0), ("High", 2**32 - 1)])
    assert table.lookup("Low") == 0
    assert table.lookup("High") == 0xFFFFFFFF
    assert table.entry("High").signed == -1


def test_duplicate_active_hash_warns_but_builds(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="pyvehiclehash.table"):
        with pytest.warns(DuplicateHashWarning, match="Alpha, Gamma"):
            table = VehicleIdentifierTable([("Alpha", 7), ("Beta", 8), ("Gamma", 7)])
    assert "shared by active entries" in caplog.text
    assert table.reverse_lookup(7) == "Alpha"
    assert table.reverse_lookup_all(7) == ("Alpha", "Gamma")
    assert table.duplicate_hash_groups() == {7: ("Alpha", "Gamma")}


def test_duplicate_warning_can_be_disabled() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        VehicleIdentifierTable(
            [("Alpha", 7), ("Gamma", 7)],
            config=VehicleTableConfig(warn_on_duplicate_hashes=False),
        )


def test_aliases_sharing_successor_hash_do_not_warn() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        table = VehicleIdentifierTable([("NewName", 5)], [("OldName", 5, "NewName")])
    assert table.aliases() == (HistoricalAlias(name="OldName", hash=5, superseded_by="NewName"),)


def test_alias_hash_mismatch_rejected() -> None:
    with pytest.raises(VehicleTableError, match="does not match"):
        VehicleIdentifierTable([("NewName", 5)], [("OldName", 6, "NewName")])


def test_alias_unknown_successor_rejected() -> None:
    with pytest.raises(VehicleTableError, match="unknown name 'Missing'"):
        VehicleIdentifierTable([("NewName", 5)], [("OldName", 5, "Missing")])


def test_alias_colliding_with_active_name_rejected() -> None:
    with pytest.raises(VehicleTableError, match="collides"):
        VehicleIdentifierTable([("NewName", 5), ("OldName", 6)], [("OldName", 5, "NewName")])


def test_duplicate_alias_rejected() -> None:
    with pytest.raises(VehicleTableError, match="duplicate historical alias"):
        VehicleIdentifierTable([("NewName", 5)], [("OldName", 5, "NewName"), ("OldName", 5, "NewName")])


def test_from_enum_keeps_declaration_order() -> None:
    class Sample(enum.IntEnum):
        Zeta = 3
        Alpha = 1
        Mid = 2

    table = VehicleIdentifierTable.from_enum(Sample)
    assert table.names() == ("Zeta", "Alpha", "Mid")
    assert table.lookup("Alpha") == 1
    assert repr(table) == "VehicleIdentifierTable(entries=3, aliases=0)"


def test_debug_log_on_build(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pyvehiclehash.table"):
        VehicleIdentifierTable([("Alpha", 1)])
    assert "Built vehicle table with 1 entries and 0 historical aliases" in caplog.text


def test_alias_case_only_difference_rejected() -> None:
    with pytest.raises(VehicleTableError, match="only by case"):
        VehicleIdentifierTable([("NewName", 5)], [("OldName", 5, "NewName"), ("OLDNAME", 5, "NewName")])


def test_duplicate_warning_points_at_caller() -> None:
    with pytest.warns(DuplicateHashWarning) as record:
        VehicleIdentifierTable([("Alpha", 7), ("Gamma", 7)])
    assert record[0].filename == __file__


def test_duplicate_warning_from_enum_points_at_caller() -> None:
    class WithAlias(enum.IntEnum):
        Alpha = 7
        Gamma = 7

    with pytest.warns(DuplicateHashWarning) as record:
        table = VehicleIdentifierTable.from_enum(WithAlias)
    assert record[0].filename == __file__
    assert table.reverse_lookup_all(7) == ("Alpha", "Gamma")
