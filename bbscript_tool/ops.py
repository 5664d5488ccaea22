from __future__ import annotations

import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .errors import ValidationError
from .uasset import combined_size, container_only_size, patch_metadata
from .uexp import InjectResult, extract, inject

UEXP_EXT = ".uexp"
UASSET_EXT = ".uasset"


@dataclass
class InjectReport:
    result: InjectResult
    new_combined_size: int
    new_uexp_size: int


def write_atomic(path: Path, data: bytes) -> None:
    """Write to a temp file next to path, then rename it over path."""
    path = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def extract_file(uexp: Path, output: Path, overwrite: bool = False) -> bytes:
    uexp, output = Path(uexp), Path(output)
    if output.exists() and not overwrite:
        raise ValidationError("Output file already exists! Specify -o to overwrite")

    payload = extract(uexp.read_bytes())
    write_atomic(output, payload)
    return payload


def check_extensions(uexp: Path, uasset: Path) -> None:
    if Path(uexp).suffix.lower() != UEXP_EXT or Path(uasset).suffix.lower() != UASSET_EXT:
        raise ValidationError(
            "Filenames do not have correct extensions! "
            "Did you enter the UEXP and UASSET in the correct order?"
        )


def inject_files(payload: Path, uexp: Path, uasset: Path, force: bool = False) -> InjectReport:
    payload, uexp, uasset = Path(payload), Path(uexp), Path(uasset)
    if not force:
        check_extensions(uexp, uasset)

    script = payload.read_bytes()
    uexp_bytes = uexp.read_bytes()
    uasset_bytes = uasset.read_bytes()

    # everything that can fail runs before the first write
    result = inject(script, uexp_bytes)
    new_uasset = patch_metadata(uasset_bytes, uexp_bytes, result.container)

    write_atomic(uasset, new_uasset)
    write_atomic(uexp, result.container)

    return InjectReport(
        result=result,
        new_combined_size=combined_size(len(result.container), len(uasset_bytes)),
        new_uexp_size=container_only_size(len(result.container)),
    )
