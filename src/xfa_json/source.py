"""Read XFA XML text from a file or stdin."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from xfa_json.constants import XML_ENCODING
from xfa_json.errors import InputReadError


def _decode(raw: bytes, origin: str) -> str:
    try:
        return raw.decode(XML_ENCODING)
    except UnicodeDecodeError as e:
        raise InputReadError(f"{origin} is not valid UTF-8: {e}") from e


def read_xml_text(path: Optional[Union[str, Path]] = None) -> str:
    """Return the XML in `path`, or on stdin when `path` is None or '-'.

    A leading BOM is stripped. Raises InputReadError on any read failure.
    """
    if path is None or str(path) == "-":
        return _decode(sys.stdin.buffer.read(), "stdin")

    p = Path(path)
    if not p.is_file():
        raise InputReadError(f"File not found: {p}")
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise InputReadError(f"Could not read {p}: {e}") from e
    return _decode(raw, str(p))
