"""Immutable name-to-hash lookup table.

:class:`VehicleIdentifierTable` is built once and never mutated.  Its
indexes are read-only mapping proxies populated in ``__init__``, so a
fully constructed table can be shared between threads without locking.

Reverse lookups follow a *first-declared wins* policy: when several
names share a hash, :meth:`VehicleIdentifierTable.reverse_lookup` returns
the earliest one and :meth:`VehicleIdentifierTable.reverse_lookup_all`
returns all of them in declaration order.
"""

from __future__ import annotations

import enum
import inspect
import logging
import warnings
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from pydantic import ValidationError

from pyvehiclehash.config import VehicleTableConfig
from pyvehiclehash.exceptions import DuplicateHashWarning, UnknownIdentifierError, VehicleTableError
from pyvehiclehash.hashes import HISTORICAL_ALIASES, VehicleHash
from pyvehiclehash.models import HistoricalAlias, VehicleTypeEntry

_logger = logging.getLogger(__name__)


def _external_stacklevel() -> int:
    """Return the ``warnings.warn`` stacklevel of the first caller outside this module."""
    frame = inspect.currentframe()
    level = 0
    while frame is not None and frame.f_globals.get("__name__") == __name__:
        frame = frame.f_back
        level += 1
    del frame
    return level


def _build_entry(name: str, value: int) -> VehicleTypeEntry:
    try:
        return VehicleTypeEntry(name=name, hash=int(value))
    except ValidationError as exc:
        raise VehicleTableError(f"invalid entry {name!r}={value!r}: {exc.errors()[0]['msg']}") from exc


def _build_alias(name: str, value: int, superseded_by: str) -> HistoricalAlias:
    try:
        return HistoricalAlias(name=name, hash=int(value), superseded_by=superseded_by)
    except ValidationError as exc:
        raise VehicleTableError(f"invalid historical alias {name!r}={value!r}: {exc.errors()[0]['msg']}") from exc


class VehicleIdentifierTable:
    """Read-only mapping from symbolic vehicle names to 32-bit hashes.

    Parameters
    ----------
    entries : iterable of (name, hash) pairs or VehicleTypeEntry
        Active entries in declaration order.
    aliases : iterable of (name, hash, superseded_by) triples or HistoricalAlias
        Retired names.  Each must carry the same hash as its successor.
    config : VehicleTableConfig, optional
        Default lookup options.

    Raises
    ------
    VehicleTableError
        On duplicate names, hashes outside ``[0, 2**32)``, or an alias
        that does not match the entry it claims to be replaced by.
    """

    def __init__(
        self,
        entries: Iterable[VehicleTypeEntry | tuple[str, int]],
        aliases: Iterable[HistoricalAlias | tuple[str, int, str]] = (),
        *,
        config: VehicleTableConfig | None = None,
    ) -> None:
        self._config = config or VehicleTableConfig()

        by_name: dict[str, VehicleTypeEntry] = {}
        by_folded: dict[str, VehicleTypeEntry] = {}
        by_hash: dict[int, list[str]] = {}
        for item in entries:
            entry = item if isinstance(item, VehicleTypeEntry) else _build_entry(*item)
            if entry.name in by_name:
                raise VehicleTableError(f"duplicate symbolic name {entry.name!r}")
            folded = entry.name.casefold()
            if folded in by_folded:
                raise VehicleTableError(
                    f"symbolic name {entry.name!r} differs from {by_folded[folded].name!r} only by case"
                )
            by_name[entry.name] = entry
            by_folded[folded] = entry
            by_hash.setdefault(entry.hash, []).append(entry.name)

        alias_by_name: dict[str, HistoricalAlias] = {}
        alias_by_folded: dict[str, HistoricalAlias] = {}
        for item in aliases:
            alias = item if isinstance(item, HistoricalAlias) else _build_alias(*item)
            if alias.name in by_name or alias.name.casefold() in by_folded:
                raise VehicleTableError(f"historical alias {alias.name!r} collides with an active name")
            if alias.name in alias_by_name:
                raise VehicleTableError(f"duplicate historical alias {alias.name!r}")
            folded_alias = alias.name.casefold()
            if folded_alias in alias_by_folded:
                raise VehicleTableError(
                    f"historical alias {alias.name!r} differs from {alias_by_folded[folded_alias].name!r} only by case"
                )
            successor = by_name.get(alias.superseded_by)
            if successor is None:
                raise VehicleTableError(
                    f"historical alias {alias.name!r} is superseded by unknown name {alias.superseded_by!r}"
                )
            if successor.hash != alias.hash:
                raise VehicleTableError(
                    f"historical alias {alias.name!r}={alias.hash} does not match "
                    f"{successor.name!r}={successor.hash}"
                )
            alias_by_name[alias.name] = alias
            alias_by_folded[folded_alias] = alias

        self._entries: tuple[VehicleTypeEntry, ...] = tuple(by_name.values())
        self._aliases: tuple[HistoricalAlias, ...] = tuple(alias_by_name.values())
        self._by_name = MappingProxyType(by_name)
        self._by_folded = MappingProxyType(by_folded)
        self._alias_by_name = MappingProxyType(alias_by_name)
        self._alias_by_folded = MappingProxyType(alias_by_folded)
        self._by_hash = MappingProxyType({h: tuple(names) for h, names in by_hash.items()})

        duplicates = {h: names for h, names in self._by_hash.items() if len(names) > 1}
        if duplicates:
            _logger.warning("Vehicle table has %d hash value(s) shared by active entries", len(duplicates))
            if self._config.warn_on_duplicate_hashes:
                stacklevel = _external_stacklevel()
                for value, names in duplicates.items():
                    warnings.warn(
                        f"hash {value} is shared by {', '.join(names)}",
                        DuplicateHashWarning,
                        stacklevel=stacklevel,
                    )

        _logger.debug(
            "Built vehicle table with %d entries and %d historical aliases",
            len(self._entries),
            len(self._aliases),
        )

    @classmethod
    def from_enum(
        cls,
        enum_cls: type[enum.IntEnum],
        aliases: Iterable[HistoricalAlias | tuple[str, int, str]] = (),
        *,
        config: VehicleTableConfig | None = None,
    ) -> VehicleIdentifierTable:
        """Build a table from an ``IntEnum`` in member declaration order.

        Enum aliases (members whose value repeats an earlier member) are
        included as entries of their own.
        """
        return cls(
            ((name, int(member)) for name, member in enum_cls.__members__.items()),
            aliases,
            config=config,
        )

    @property
    def config(self) -> VehicleTableConfig:
        return self._config

    # ------------------------------------------------------------------
    # Forward lookup
    # ------------------------------------------------------------------

    def _resolve(self, name: str, ignore_case: bool, include_aliases: bool) -> VehicleTypeEntry | HistoricalAlias | None:
        if ignore_case:
            folded = name.casefold()
            found: VehicleTypeEntry | HistoricalAlias | None = self._by_folded.get(folded)
            if found is None and include_aliases:
                found = self._alias_by_folded.get(folded)
            return found
        found = self._by_name.get(name)
        if found is None and include_aliases:
            found = self._alias_by_name.get(name)
        return found

    def entry(
        self,
        name: str,
        *,
        ignore_case: bool | None = None,
        include_aliases: bool | None = None,
    ) -> VehicleTypeEntry:
        """Return the active entry for *name*.

        A historical alias resolves to the entry that superseded it when
        ``include_aliases`` is on.

        Raises
        ------
        UnknownIdentifierError
            If *name* is not in the table.
        """
        if ignore_case is None:
            ignore_case = self._config.ignore_case
        if include_aliases is None:
            include_aliases = self._config.include_aliases
        found = self._resolve(name, ignore_case, include_aliases)
        if found is None:
            raise UnknownIdentifierError(f"unknown vehicle name {name!r}", identifier=name)
        if isinstance(found, HistoricalAlias):
            return self._by_name[found.superseded_by]
        return found

    def lookup(
        self,
        name: str,
        *,
        ignore_case: bool | None = None,
        include_aliases: bool | None = None,
    ) -> int:
        """Return the 32-bit hash for *name*.

        Keyword options default to the table's :class:`VehicleTableConfig`.

        Raises
        ------
        UnknownIdentifierError
            If *name* is not in the table.
        """
        return self.entry(name, ignore_case=ignore_case, include_aliases=include_aliases).hash

    def get(
        self,
        name: str,
        default: int | None = None,
        *,
        ignore_case: bool | None = None,
        include_aliases: bool | None = None,
    ) -> int | None:
        """Return the hash for *name*, or *default* when it is unknown.

        Takes the same keyword options as :meth:`lookup`.
        """
        try:
            return self.lookup(name, ignore_case=ignore_case, include_aliases=include_aliases)
        except UnknownIdentifierError:
            return default

    # ------------------------------------------------------------------
    # Reverse lookup
    # ------------------------------------------------------------------

    def reverse_lookup(self, value: int) -> str:
        """Return the first-declared active name for hash *value*.

        Raises
        ------
        UnknownIdentifierError
            If no active entry has that hash.
        """
        names = self._by_hash.get(value)
        if not names:
            raise UnknownIdentifierError(f"unknown vehicle hash {value!r}", identifier=value)
        return names[0]

    def reverse_lookup_all(self, value: int, *, include_aliases: bool | None = None) -> tuple[str, ...]:
        """Return every name with hash *value*, active names first."""
        if include_aliases is None:
            include_aliases = self._config.include_aliases
        names = self._by_hash.get(value, ())
        if include_aliases:
            names = names + tuple(a.name for a in self._aliases if a.hash == value)
        return names

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def entries(self) -> tuple[VehicleTypeEntry, ...]:
        """Return all active entries in declaration order."""
        return self._entries

    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def aliases(self) -> tuple[HistoricalAlias, ...]:
        """Return the historical aliases in declaration order."""
        return self._aliases

    def duplicate_hash_groups(self) -> dict[int, tuple[str, ...]]:
        """Return hashes carried by more than one name, aliases included.

        Each group lists active names first, then retired ones.
        """
        groups: dict[int, tuple[str, ...]] = {}
        for value in self._by_hash:
            names = self.reverse_lookup_all(value, include_aliases=True)
            if len(names) > 1:
                groups[value] = names
        return groups

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[VehicleTypeEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._by_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._entries)}, aliases={len(self._aliases)})"


VEHICLE_TABLE = VehicleIdentifierTable.from_enum(VehicleHash, HISTORICAL_ALIASES)
"""The shipped vehicle table, built at import."""
