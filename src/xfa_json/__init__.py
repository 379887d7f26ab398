"""Convert XFA form data islands to clean JSON."""

from xfa_json.errors import (
    DataSectionNotFound,
    EmptyResult,
    InputReadError,
    SerializationError,
    XfaConversionError,
    XfaJsonError,
    XmlParseError,
)
from xfa_json.render import render_xfa
from xfa_json.settings import XfaMode
from xfa_json.transform import xfa_xml_to_dict, xfa_xml_to_json

__version__ = "0.1.0"

__all__ = [
    "DataSectionNotFound",
    "EmptyResult",
    "InputReadError",
    "SerializationError",
    "XfaConversionError",
    "XfaJsonError",
    "XfaMode",
    "XmlParseError",
    "render_xfa",
    "xfa_xml_to_dict",
    "xfa_xml_to_json",
]
