"""Extract / reinject BBScript in Guilty Gear Strive .uexp + .uasset files."""
from .errors import BBScriptError, FormatError, ValidationError
from .locate import FieldLocation, find_u32, locate
from .uasset import patch_metadata
from .uexp import InjectResult, extract, inject

__all__ = [
    "BBScriptError", "FormatError", "ValidationError",
    "FieldLocation", "find_u32", "locate",
    "patch_metadata",
    "InjectResult", "extract", "inject",
]
