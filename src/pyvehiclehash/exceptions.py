"""Custom exception hierarchy for pyvehiclehash."""

from __future__ import annotations


class VehicleHashError(Exception):
    """Base exception for all pyvehiclehash errors."""


class VehicleConfigError(VehicleHashError):
    """Invalid or missing configuration."""


class UnknownIdentifierError(VehicleHashError, LookupError):
    """A symbolic name or hash is not present in the table."""

    def __init__(self, message: str, *, identifier: str | int = "") -> None:
        self.identifier = identifier
        super().__init__(message)


class VehicleTableError(VehicleHashError):
    """A table failed its integrity checks while being built.

    Raised for duplicate symbolic names, out-of-range hashes, and
    historical aliases that disagree with the entry that replaced them.
    """


class DuplicateHashWarning(UserWarning):
    """Two or more active entries share one hash value.

    Advisory only.  Historical aliases that share their successor's
    hash are expected and never trigger this warning.
    """
