"""Base model and shared field types for table entries.

Every entry model inherits from :class:`VehicleHashBaseModel` which is
frozen, so entries are immutable once the table has been built.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

UINT32_MAX = 0xFFFFFFFF

UInt32 = Annotated[int, Field(ge=0, le=UINT32_MAX, strict=True)]
"""A 32-bit unsigned integer hash; ``bool`` and out-of-range ints are rejected."""

SymbolicName = Annotated[str, Field(min_length=1, pattern=r"^\S+$")]
"""A non-empty symbolic identifier without whitespace."""


def to_signed(value: int) -> int:
    """Reinterpret a 32-bit unsigned *value* as a two's-complement ``int32``."""
    return value - (1 << 32) if value > 0x7FFFFFFF else value


class VehicleHashBaseModel(BaseModel):
    """Base for table entry models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
