"""Data models for vehicle hash table entries."""

from pyvehiclehash.models._base import UINT32_MAX, UInt32, VehicleHashBaseModel, to_signed
from pyvehiclehash.models.entry import HistoricalAlias, VehicleTypeEntry

__all__ = [
    "UINT32_MAX",
    "HistoricalAlias",
    "UInt32",
    "VehicleHashBaseModel",
    "VehicleTypeEntry",
    "to_signed",
]
