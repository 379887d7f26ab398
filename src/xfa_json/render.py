"""Produce the output for one XFA island according to an XfaMode."""

from typing import Optional

from xfa_json.constants import JSON_INDENT
from xfa_json.errors import XfaConversionError
from xfa_json.logging_setup import get_logger
from xfa_json.settings import FilterConfig, XfaMode
from xfa_json.transform import xfa_xml_to_json

log = get_logger(__name__)


def render_xfa(
    xml: str,
    mode: XfaMode = XfaMode.CLEAN,
    *,
    indent: int = JSON_INDENT,
    fallback_to_raw: bool = True,
    filters: Optional[FilterConfig] = None,
) -> Optional[str]:
    """Return the text to emit for `xml`, or None for `XfaMode.OFF`.

    In `full` and `clean` mode a failed conversion yields the XML unchanged
    when `fallback_to_raw` is set; otherwise the XfaConversionError propagates.
    """
    mode = XfaMode(mode)
    if mode is XfaMode.OFF:
        return None
    if mode is XfaMode.RAW:
        return xml

    try:
        return xfa_xml_to_json(
            xml, data_only=mode is XfaMode.CLEAN, indent=indent, filters=filters
        )
    except XfaConversionError as e:
        if not fallback_to_raw:
            raise
        log.warning(
            "XFA conversion failed, emitting raw XML",
            mode=mode.value,
            error=str(e),
            error_type=type(e).__name__,
        )
        return xml
