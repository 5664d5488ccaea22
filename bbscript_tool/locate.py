from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

from .errors import FormatError

U32 = struct.Struct("<I")


def u32_bytes(value: int) -> bytes:
    if not 0 <= value <= 0xFFFFFFFF:
        raise FormatError(f"Value {value:#x} does not fit in a 32-bit size field")
    return U32.pack(value)


def locate(haystack: bytes, needle: bytes) -> Optional[int]:
    """Lowest offset of needle in haystack, or None."""
    i = haystack.find(needle)
    if i == -1:
        return None
    return i


@dataclass(frozen=True)
class FieldLocation:
    offset: int
    located: bool  # False -> nominal offset, search missed

    def describe(self) -> str:
        how = "found" if self.located else "nominal"
        return f"0x{self.offset:X} ({how})"


def find_u32(buf: bytes, value: int, nominal: Optional[int] = None,
             limit: Optional[int] = None) -> Optional[FieldLocation]:
    """
    Search buf (or buf[:limit]) for the little-endian bytes of value.
    Falls back to nominal when the search misses; returns None when there
    is no nominal offset either, so the caller decides if that is fatal.
    """
    region = buf if limit is None else buf[:limit]
    off = locate(region, u32_bytes(value))
    if off is not None:
        return FieldLocation(off, True)
    if nominal is not None:
        return FieldLocation(nominal, False)
    return None
