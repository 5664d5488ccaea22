import struct

import pytest

MARKER = bytes.fromhex("EFBEADDE")  # 0xDEADBEEF


def build_uexp(payload: bytes, size_at=0x24, marker: bytes = MARKER) -> bytes:
    header = bytearray(0x34)
    if size_at is not None:
        struct.pack_into("<II", header, size_at, len(payload), len(payload))
    return bytes(header) + payload + marker


def build_uasset(uexp_len: int, size: int = 0x100, combined_at=0x50, uexp_at=0x80) -> bytes:
    buf = bytearray(size)
    if combined_at is not None:
        struct.pack_into("<I", buf, combined_at, uexp_len - 4 + size)
    if uexp_at is not None:
        struct.pack_into("<I", buf, uexp_at, uexp_len - 4)
    return bytes(buf)


def read_u32(buf: bytes, off: int) -> int:
    return struct.unpack_from("<I", buf, off)[0]


@pytest.fixture
def asset_pair(tmp_path):
    """chr.uexp holding b'ABCD' and its chr.uasset, plus an edited script."""
    uexp = build_uexp(b"ABCD")
    uexp_path = tmp_path / "chr.uexp"
    uasset_path = tmp_path / "chr.uasset"
    script_path = tmp_path / "edited.bbscript"
    uexp_path.write_bytes(uexp)
    uasset_path.write_bytes(build_uasset(len(uexp)))
    script_path.write_bytes(b"HELLOWORLD")
    return script_path, uexp_path, uasset_path
