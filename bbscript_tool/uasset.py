from __future__ import annotations

from .errors import FormatError
from .locate import find_u32, u32_bytes
from .uexp import TRAILER_SIZE

# uasset + uexp total size; stable across the versions we have seen
COMBINED_SIZE_OFFSET = 0xA9


def combined_size(container_len: int, metadata_len: int) -> int:
    return container_len - TRAILER_SIZE + metadata_len


def container_only_size(container_len: int) -> int:
    return container_len - TRAILER_SIZE


def patch_metadata(metadata: bytes, old_container: bytes, new_container: bytes) -> bytes:
    """
    Rewrite the two size fields in a .uasset after its .uexp changed size.

    The combined-size field falls back to COMBINED_SIZE_OFFSET when its old
    value can't be found. The uexp-size field has no usable fixed offset, so
    a miss raises FormatError and nothing is written.
    """
    old_combined = combined_size(len(old_container), len(metadata))
    new_combined = combined_size(len(new_container), len(metadata))
    old_only = container_only_size(len(old_container))
    new_only = container_only_size(len(new_container))

    new_combined_bytes = u32_bytes(new_combined)
    new_only_bytes = u32_bytes(new_only)

    total_pos = find_u32(metadata, old_combined, nominal=COMBINED_SIZE_OFFSET)
    if total_pos.offset + 4 > len(metadata):
        raise FormatError(
            f"Metadata too small for the combined-size field at 0x{total_pos.offset:X} "
            f"({len(metadata)} bytes)"
        )

    uexp_pos = find_u32(metadata, old_only)
    if uexp_pos is None:
        raise FormatError(
            f"Could not locate container-size field (0x{old_only:X}) in metadata"
        )

    out = bytearray(metadata)
    out[total_pos.offset:total_pos.offset + 4] = new_combined_bytes
    out[uexp_pos.offset:uexp_pos.offset + 4] = new_only_bytes
    return bytes(out)
