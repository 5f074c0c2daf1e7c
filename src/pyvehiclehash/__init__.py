"""pyvehiclehash - Vehicle model hash constants for game scripting."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyvehiclehash")
except PackageNotFoundError:
    __version__ = "0+local"
from pyvehiclehash.config import VehicleTableConfig
from pyvehiclehash.exceptions import (
    DuplicateHashWarning,
    UnknownIdentifierError,
    VehicleConfigError,
    VehicleHashError,
    VehicleTableError,
)
from pyvehiclehash.hashes import HISTORICAL_ALIASES, VehicleHash
from pyvehiclehash.models import HistoricalAlias, VehicleTypeEntry
from pyvehiclehash.table import VEHICLE_TABLE, VehicleIdentifierTable

lookup = VEHICLE_TABLE.lookup
get = VEHICLE_TABLE.get
reverse_lookup = VEHICLE_TABLE.reverse_lookup
entries = VEHICLE_TABLE.entries

__all__ = [
    "__version__",
    "DuplicateHashWarning",
    "HISTORICAL_ALIASES",
    "HistoricalAlias",
    "UnknownIdentifierError",
    "VEHICLE_TABLE",
    "VehicleConfigError",
    "VehicleHash",
    "VehicleHashError",
    "VehicleIdentifierTable",
    "VehicleTableConfig",
    "VehicleTableError",
    "VehicleTypeEntry",
    "entries",
    "get",
    "lookup",
    "reverse_lookup",
]
