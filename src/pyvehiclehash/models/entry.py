"""Vehicle table entry models."""

from __future__ import annotations

from pyvehiclehash.models._base import SymbolicName, UInt32, VehicleHashBaseModel, to_signed


class VehicleTypeEntry(VehicleHashBaseModel):
    """One active name-to-hash association.

    Parameters
    ----------
    name : str
        Symbolic identifier (e.g. ``"Adder"``).
    hash : int
        Precomputed 32-bit unsigned model hash.
    """

    name: SymbolicName
    hash: UInt32

    @property
    def signed(self) -> int:
        """The hash read as a signed 32-bit integer."""
        return to_signed(self.hash)

    @property
    def hex(self) -> str:
        """The hash as ``0x`` followed by eight upper-case hex digits."""
        return f"0x{self.hash:08X}"


class HistoricalAlias(VehicleHashBaseModel):
    """A retired symbolic name kept for traceability.

    The alias carries the same hash as the active entry named by
    ``superseded_by``.
    """

    name: SymbolicName
    hash: UInt32
    superseded_by: SymbolicName
