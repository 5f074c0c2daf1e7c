"""Tests for the entry models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyvehiclehash.models import HistoricalAlias, VehicleTypeEntry, to_signed


class TestVehicleTypeEntry:
    def test_views(self) -> None:
        entry = VehicleTypeEntry(name="ZType", hash=758895617)
        assert entry.signed == 758895617
        assert entry.hex == "0x2D3BD401"

    def test_frozen(self) -> None:
        entry = VehicleTypeEntry(name="Adder", hash=3078201489)
        with pytest.raises(ValidationError):
            entry.hash = 1  # type: ignore[misc]

    def test_hashable_and_comparable(self) -> None:
        a = VehicleTypeEntry(name="Adder", hash=3078201489)
        b = VehicleTypeEntry(name="Adder", hash=3078201489)
        assert a == b
        assert len({a, b}) == 1

    @pytest.mark.parametrize("value", [-1, 2**32, True, "123"])
    def test_rejects_invalid_hash(self, value: object) -> None:
        with pytest.raises(ValidationError):
            VehicleTypeEntry(name="Adder", hash=value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", ["", "Two Words"])
    def test_rejects_invalid_name(self, name: str) -> None:
        with pytest.raises(ValidationError):
            VehicleTypeEntry(name=name, hash=1)

    def test_rejects_extra_fields(self) -> None:
        with pytest.raises(ValidationError):
            VehicleTypeEntry(name="Adder", hash=1, model="adder")  # type: ignore[call-arg]


def test_historical_alias_fields() -> None:
    alias = HistoricalAlias(name="UtilityTruck", hash=516990260, superseded_by="UtilliTruck")
    assert alias.model_dump() == {
        "name": "UtilityTruck",
        "hash": 516990260,
        "superseded_by": "UtilliTruck",
    }


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, 0), (0x7FFFFFFF, 2147483647), (0x80000000, -2147483648), (0xFFFFFFFF, -1)],
)
def test_to_signed(value: int, expected: int) -> None:
    assert to_signed(value) == expected
