"""
locate.py

Find the element that roots the filled-in form data inside an XFA document.

Real-world producers are inconsistent about namespaces, so the lookup tries,
in order of preference:

- `namespace`: a <data> element in the XFA data namespace
- `datasets-parent`: a <data> element directly under a <datasets> element
- `fallback`: the first <data> element anywhere

The first two are checked together in a single document-order pass; the
fallback is only used when neither matched.
"""
from __future__ import annotations

from typing import Iterator, Optional, Tuple
import xml.etree.ElementTree as ET

from xfa_json.constants import DATA_TAG, DATASETS_TAG, XFA_DATA_NS
from xfa_json.errors import DataSectionNotFound


def split_tag(tag: str) -> Tuple[str, str]:
    """Split an ElementTree '{uri}local' name into (uri, local)."""
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return "", tag


def local_name(tag: str) -> str:
    return split_tag(tag)[1]


def iter_with_parent(
    root: ET.Element,
) -> Iterator[Tuple[ET.Element, Optional[ET.Element]]]:
    """Yield (element, parent) pairs depth-first in document order."""
    stack: list = [(root, None)]
    while stack:
        elem, parent = stack.pop()
        if not isinstance(elem.tag, str):
            # comments / processing instructions
            continue
        yield elem, parent
        stack.extend((child, elem) for child in reversed(list(elem)))


def locate_data_section(root: ET.Element) -> Tuple[ET.Element, str]:
    """Return the data element and the name of the strategy that found it.

    Raises DataSectionNotFound when the document has no <data> element.
    """
    first_data: Optional[ET.Element] = None

    for elem, parent in iter_with_parent(root):
        uri, name = split_tag(elem.tag)
        if name != DATA_TAG:
            continue
        if uri == XFA_DATA_NS:
            return elem, "namespace"
        if parent is not None and local_name(parent.tag) == DATASETS_TAG:
            return elem, "datasets-parent"
        if first_data is None:
            first_data = elem

    if first_data is None:
        raise DataSectionNotFound()
    return first_data, "fallback"


def find_data_section(root: ET.Element) -> ET.Element:
    return locate_data_section(root)[0]
