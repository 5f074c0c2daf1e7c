from __future__ import annotations

import pytest

from pyvehiclehash import VehicleConfigError, VehicleTableConfig


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "VEHICLEHASH_IGNORE_CASE",
        "VEHICLEHASH_INCLUDE_ALIASES",
        "VEHICLEHASH_WARN_ON_DUPLICATES",
    ):
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = VehicleTableConfig.from_env()
    assert config == VehicleTableConfig()
    assert config.ignore_case is False
    assert config.include_aliases is False
    assert config.warn_on_duplicate_hashes is True


def test_reads_boolean_words(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLEHASH_IGNORE_CASE", " Yes ")
    monkeypatch.setenv("VEHICLEHASH_INCLUDE_ALIASES", "1")
    monkeypatch.setenv("VEHICLEHASH_WARN_ON_DUPLICATES", "off")

    config = VehicleTableConfig.from_env()
    assert config.ignore_case is True
    assert config.include_aliases is True
    assert config.warn_on_duplicate_hashes is False


def test_unrecognised_value_keeps_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLEHASH_IGNORE_CASE", "maybe")
    monkeypatch.setenv("VEHICLEHASH_WARN_ON_DUPLICATES", "")

    config = VehicleTableConfig.from_env()
    assert config.ignore_case is False
    assert config.warn_on_duplicate_hashes is True


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLEHASH_IGNORE_CASE", "true")
    config = VehicleTableConfig.from_env(ignore_case=False, include_aliases=True)
    assert config.ignore_case is False
    assert config.include_aliases is True


def test_unknown_override_rejected() -> None:
    with pytest.raises(VehicleConfigError, match="case_sensitive"):
        VehicleTableConfig.from_env(case_sensitive=True)
