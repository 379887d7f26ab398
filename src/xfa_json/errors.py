"""Exception hierarchy for xfa_json.

Every conversion failure derives from `XfaConversionError`, so callers can
catch that single type and fall back to presenting the raw XML.
"""


class XfaJsonError(Exception):
    """Base class for all errors raised by xfa_json."""


class XfaConversionError(XfaJsonError):
    """XFA XML could not be turned into JSON."""


class XmlParseError(XfaConversionError):
    def __init__(self, detail: str):
        super().__init__(f"XML parse error: {detail}")
        self.detail = detail


class DataSectionNotFound(XfaConversionError):
    def __init__(self):
        super().__init__("Could not locate form data section in XFA XML")


class EmptyResult(XfaConversionError):
    """A data section existed but nothing survived conversion and filtering."""

    def __init__(self):
        super().__init__("No valid data found after extraction")


class SerializationError(XfaConversionError):
    def __init__(self, detail: str):
        super().__init__(f"JSON serialization error: {detail}")
        self.detail = detail


class InputReadError(XfaJsonError):
    """The XML source (file or stdin) could not be read or decoded."""
