import pytest

from bbscript_tool.errors import FormatError
from bbscript_tool.uasset import COMBINED_SIZE_OFFSET, patch_metadata
from bbscript_tool.uexp import inject

from conftest import build_uasset, build_uexp, read_u32


@pytest.fixture
def containers():
    old = build_uexp(b"ABCD")
    new = inject(b"HELLOWORLD", old).container
    return old, new


def test_patch_located_fields(containers):
    old, new = containers
    meta = build_uasset(len(old))
    out = patch_metadata(meta, old, new)

    assert len(out) == len(meta)
    assert read_u32(out, 0x50) == len(new) - 4 + len(meta)
    assert read_u32(out, 0x80) == len(new) - 4
    # everything else unchanged
    assert out[:0x50] == meta[:0x50]
    assert out[0x54:0x80] == meta[0x54:0x80]
    assert out[0x84:] == meta[0x84:]


def test_patch_combined_fallback_to_nominal(containers):
    old, new = containers
    meta = build_uasset(len(old), combined_at=None, uexp_at=0x10)
    out = patch_metadata(meta, old, new)

    assert read_u32(out, COMBINED_SIZE_OFFSET) == len(new) - 4 + len(meta)
    assert read_u32(out, 0x10) == len(new) - 4


def test_missing_container_size_is_fatal(containers):
    old, new = containers
    meta = bytearray(build_uasset(len(old), uexp_at=None))
    before = bytes(meta)
    with pytest.raises(FormatError, match="container-size"):
        patch_metadata(meta, old, new)
    assert bytes(meta) == before


def test_metadata_too_small_for_nominal(containers):
    old, new = containers
    meta = build_uasset(len(old), size=0x40, combined_at=None, uexp_at=0x10)
    with pytest.raises(FormatError):
        patch_metadata(meta, old, new)


def test_same_size_is_noop():
    old = build_uexp(b"ABCD")
    new = inject(b"WXYZ", old).container
    meta = build_uasset(len(old))
    assert patch_metadata(meta, old, new) == meta
