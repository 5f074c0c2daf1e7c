"""Lookup configuration for pyvehiclehash."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyvehiclehash.exceptions import VehicleConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class VehicleTableConfig:
    """Table lookup options.

    Parameters
    ----------
    ignore_case : bool
        Match symbolic names case-insensitively (``"adder"`` finds
        ``Adder``).  Off by default: names are exact identifiers.
    include_aliases : bool
        Resolve retired names (e.g. ``UtilityTruck``) to the hash of the
        entry that superseded them.
    warn_on_duplicate_hashes : bool
        Emit :class:`~pyvehiclehash.exceptions.DuplicateHashWarning` when
        a table is built with active entries sharing a hash.
    """

    ignore_case: bool = False
    include_aliases: bool = False
    warn_on_duplicate_hashes: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> VehicleTableConfig:
        """Create configuration from environment variables.

        Reads ``VEHICLEHASH_IGNORE_CASE``, ``VEHICLEHASH_INCLUDE_ALIASES``
        and ``VEHICLEHASH_WARN_ON_DUPLICATES``. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        VehicleTableConfig
            Populated configuration.

        Raises
        ------
        VehicleConfigError
            If an override names a field that does not exist.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise VehicleConfigError(f"unknown configuration field(s): {', '.join(unknown)}")

        env = os.environ
        defaults = cls()
        _ENV_CONFIG_MAP = {
            "VEHICLEHASH_IGNORE_CASE": "ignore_case",
            "VEHICLEHASH_INCLUDE_ALIASES": "include_aliases",
            "VEHICLEHASH_WARN_ON_DUPLICATES": "warn_on_duplicate_hashes",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            if field_name in overrides:
                continue
            config_kwargs[field_name] = _env_bool(env.get(env_key), getattr(defaults, field_name))

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
