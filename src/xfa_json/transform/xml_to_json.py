"""
xml_to_json.py

Convert the data island of an XFA document to JSON. Conventions:

- XML attributes are collected under '_attributes' (namespace declarations
  are dropped; attribute and tag names keep only their local part)
- Element text is stored under '_value' if present and non-empty
- Child elements with the same tag are grouped into lists, in document order
- An element holding only text becomes a bare string
- Schema containers ('schema', 'datamodel', 'dataDescription') are dropped

With `data_only` ("clean" mode) the top-level fields are also filtered:
system fields are skipped by name prefix and large option lists (country
pickers and the like) are skipped by name and shape. Members of a top-level
<Form> wrapper get the option-list check as well; nothing deeper does.

Leaves are always strings; no type inference is attempted.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional
import xml.etree.ElementTree as ET

from xfa_json.constants import (
    ATTRIBUTES_KEY,
    FORM_TAG,
    JSON_INDENT,
    SKIPPED_CONTAINERS,
    VALUE_KEY,
    XMLNS_PREFIX,
)
from xfa_json.errors import EmptyResult, SerializationError, XmlParseError
from xfa_json.logging_setup import get_logger
from xfa_json.settings import FilterConfig
from xfa_json.transform.classify import is_lookup_list, is_metadata_field
from xfa_json.transform.locate import local_name, locate_data_section

log = get_logger(__name__)


def collect_attributes(elem: ET.Element) -> Dict[str, str]:
    """Map local attribute names to values, skipping namespace declarations."""
    attrs: Dict[str, str] = {}
    for k, v in elem.attrib.items():
        name = local_name(k)
        if not name.startswith(XMLNS_PREFIX):
            attrs[name] = v
    return attrs


def merge_into_map(mapping: Dict[str, Any], key: str, value: Any) -> None:
    """Insert `value` under `key`, turning a repeated key into a list."""
    if key not in mapping:
        mapping[key] = value
        return

    existing = mapping[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        mapping[key] = [existing, value]


def element_to_json(elem: ET.Element, clean: bool = False) -> Optional[Any]:
    """Recursively convert an Element into a JSON value.

    Returns a string, a dict, or None when the element contributes nothing.
    `clean` is passed down unchanged; filtering is done by the caller.
    """
    tag = local_name(elem.tag)
    if tag in SKIPPED_CONTAINERS:
        return None

    node: Dict[str, Any] = {}

    attrs = collect_attributes(elem)
    if attrs:
        node[ATTRIBUTES_KEY] = attrs

    text = (elem.text or "").strip()
    if text:
        node[VALUE_KEY] = text

    has_children = False
    for child in elem:
        if not isinstance(child.tag, str):
            continue
        has_children = True
        child_repr = element_to_json(child, clean)
        if child_repr is not None:
            merge_into_map(node, local_name(child.tag), child_repr)

    # Text-only element -> bare string
    if not has_children and len(node) == 1 and VALUE_KEY in node:
        return node[VALUE_KEY]

    if not node:
        return None

    return node


def parse_xml(xml: str) -> ET.Element:
    try:
        return ET.fromstring(xml)
    except ET.ParseError as e:
        raise XmlParseError(str(e)) from e


def _drop_lookup_members(value: Dict[str, Any], filters: FilterConfig) -> Dict[str, Any]:
    return {
        k: v
        for k, v in value.items()
        if not is_lookup_list(
            k, v, filters.lookup_patterns, filters.lookup_min_items
        )
    }


def xfa_xml_to_dict(
    xml: str, data_only: bool = False, *, filters: Optional[FilterConfig] = None
) -> Dict[str, Any]:
    """Convert an XFA XML string to a dict of form data.

    Raises XmlParseError, DataSectionNotFound or EmptyResult.
    """
    filters = filters or FilterConfig()
    root = parse_xml(xml)
    data_node, strategy = locate_data_section(root)
    log.debug("Data section located", strategy=strategy)

    form_data: Dict[str, Any] = {}

    for child in data_node:
        if not isinstance(child.tag, str):
            continue
        tag = local_name(child.tag)

        if data_only and is_metadata_field(tag, filters.metadata_prefixes):
            log.debug("Skipped metadata field", field=tag)
            continue

        value = element_to_json(child, data_only)
        if value is None:
            continue

        if data_only and is_lookup_list(
            tag, value, filters.lookup_patterns, filters.lookup_min_items
        ):
            log.debug("Skipped lookup list", field=tag)
            continue

        if data_only and tag == FORM_TAG and isinstance(value, dict):
            value = _drop_lookup_members(value, filters)
            if not value:
                log.debug("Skipped form with only lookup lists", field=tag)
                continue

        merge_into_map(form_data, tag, value)

    if not form_data:
        raise EmptyResult()

    return form_data


def xfa_xml_to_json(
    xml: str,
    data_only: bool = False,
    *,
    indent: int = JSON_INDENT,
    filters: Optional[FilterConfig] = None,
) -> str:
    """Convert an XFA XML string to pretty-printed JSON.

    If `data_only` is true, metadata fields and large lookup lists are
    excluded. Any failure raises a subclass of XfaConversionError.
    """
    form_data = xfa_xml_to_dict(xml, data_only, filters=filters)
    try:
        return json.dumps(form_data, ensure_ascii=False, indent=indent)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e
