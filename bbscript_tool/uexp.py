"""
.uexp container holding a BBScript file

Layout (little-endian):
  0x00 .. 0x34   export header
                 - payload size stored twice (u32, u32), nominally at 0x24
  0x34 .. -4     BBScript payload
  -4   .. end    u32 marker (package magic), kept as-is

The size field moves around between files cooked by different tools, so it
is tracked by searching for the old payload size instead of trusting 0x24.
"""
from __future__ import annotations

from dataclasses import dataclass

from .errors import FormatError
from .locate import U32, FieldLocation, find_u32, u32_bytes

HEADER_SIZE = 0x34
TRAILER_SIZE = 0x4
SIZE_FIELD_OFFSET = 0x24


@dataclass
class InjectResult:
    container: bytes
    marker: int
    old_payload_size: int
    new_payload_size: int
    size_field: FieldLocation


def check_container(container: bytes) -> None:
    if len(container) < HEADER_SIZE + TRAILER_SIZE:
        raise FormatError(
            f"Container too small: {len(container)} bytes "
            f"(need at least {HEADER_SIZE + TRAILER_SIZE})"
        )


def extract(container: bytes) -> bytes:
    check_container(container)
    return bytes(container[HEADER_SIZE:len(container) - TRAILER_SIZE])


def inject(new_payload: bytes, container: bytes) -> InjectResult:
    check_container(container)

    marker = U32.unpack_from(container, len(container) - TRAILER_SIZE)[0]
    old_payload_size = len(container) - HEADER_SIZE - TRAILER_SIZE
    new_payload_size = len(new_payload)
    new_size_bytes = u32_bytes(new_payload_size)

    # both slots must stay inside the header
    size_field = find_u32(container, old_payload_size,
                          nominal=SIZE_FIELD_OFFSET, limit=HEADER_SIZE - 4)

    out = bytearray(HEADER_SIZE + new_payload_size + TRAILER_SIZE)
    out[:HEADER_SIZE] = container[:HEADER_SIZE]
    out[HEADER_SIZE:HEADER_SIZE + new_payload_size] = new_payload
    U32.pack_into(out, len(out) - TRAILER_SIZE, marker)

    k = size_field.offset
    out[k:k + 4] = new_size_bytes
    out[k + 4:k + 8] = new_size_bytes

    return InjectResult(
        container=bytes(out),
        marker=marker,
        old_payload_size=old_payload_size,
        new_payload_size=new_payload_size,
        size_field=size_field,
    )
