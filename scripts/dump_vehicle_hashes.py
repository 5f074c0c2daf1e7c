#!/usr/bin/env python3
"""Dump the vehicle hash table.

Prints every active entry in declaration order, optionally followed by
the historical aliases.

Usage
-----
::

    python scripts/dump_vehicle_hashes.py
    python scripts/dump_vehicle_hashes.py --format json --aliases
    python scripts/dump_vehicle_hashes.py --format csv --signed --output hashes.csv

Options::

    --format {text,json,csv}   Output format (default: text)
    --aliases                  Include retired names
    --signed                   Add the signed 32-bit view of each hash
    --output FILE              Write output to FILE instead of stdout
    --verbose, -v              Enable debug logging

Lookup options are read from ``VEHICLEHASH_*`` environment variables.
"""

from __future__ import annotations

import argparse
import csv
import io
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyvehiclehash import HISTORICAL_ALIASES, VehicleHash, VehicleIdentifierTable, VehicleTableConfig  # noqa: E402

_logger = logging.getLogger("dump_vehicle_hashes")


def _rows(table: VehicleIdentifierTable, *, aliases: bool, signed: bool) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for entry in table.entries():
        row: dict[str, Any] = {"name": entry.name, "hash": entry.hash, "hex": entry.hex}
        if signed:
            row["signed"] = entry.signed
        if aliases:
            row["superseded_by"] = ""
        rows.append(row)
    if aliases:
        for alias in table.aliases():
            successor = table.entry(alias.superseded_by)
            row = {"name": alias.name, "hash": alias.hash, "hex": successor.hex}
            if signed:
                row["signed"] = successor.signed
            row["superseded_by"] = alias.superseded_by
            rows.append(row)
    return rows


def _render_text(rows: list[dict[str, Any]]) -> str:
    width = max((len(row["name"]) for row in rows), default=0)
    lines: list[str] = []
    for row in rows:
        line = f"{row['name']:<{width}}  {row['hash']:>10}  {row['hex']}"
        if "signed" in row:
            line += f"  {row['signed']:>11}"
        if row.get("superseded_by"):
            line += f"  -> {row['superseded_by']}"
        lines.append(line)
    return "\n".join(lines)


def _render_csv(rows: list[dict[str, Any]]) -> str:
    if not rows:
        return ""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=list(rows[0]), lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
    return buf.getvalue().rstrip("\n")


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the vehicle hash table")
    parser.add_argument("--format", choices=("text", "json", "csv"), default="text", help="Output format")
    parser.add_argument("--aliases", action="store_true", help="Include historical aliases")
    parser.add_argument("--signed", action="store_true", help="Add the signed 32-bit view of each hash")
    parser.add_argument("--output", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    table = VehicleIdentifierTable.from_enum(VehicleHash, HISTORICAL_ALIASES, config=VehicleTableConfig.from_env())
    rows = _rows(table, aliases=args.aliases, signed=args.signed)
    _logger.debug("Dumping %d rows as %s", len(rows), args.format)

    if args.format == "json":
        payload = json.dumps(rows, indent=2, ensure_ascii=False)
    elif args.format == "csv":
        payload = _render_csv(rows)
    else:
        payload = _render_text(rows)

    if args.output:
        Path(args.output).write_text(payload + "\n", encoding="utf-8")
        print(f"{len(rows)} rows written to {args.output}", file=sys.stderr)
    else:
        print(payload)


if __name__ == "__main__":
    main()
