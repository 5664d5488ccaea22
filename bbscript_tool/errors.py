class BBScriptError(Exception):
    """Base class for errors raised by the extractor/injector."""


class ValidationError(BBScriptError):
    """A caller precondition failed (existing output, wrong extensions)."""


class FormatError(BBScriptError):
    """The uexp/uasset bytes do not have the layout we expect."""
