"""Test locating the form data section inside XFA documents."""

import pytest

from xfa_json.errors import DataSectionNotFound
from xfa_json.transform.locate import (
    find_data_section,
    iter_with_parent,
    local_name,
    locate_data_section,
    split_tag,
)
from xfa_json.transform.xml_to_json import parse_xml

XFA_NS = "http://www.xfa.org/schema/xfa-data/1.0/"


def _marker(elem):
    return elem.find("marker").text


def test_namespace_match():
    root = parse_xml(
        f'<xdp><xfa:datasets xmlns:xfa="{XFA_NS}"><xfa:data><marker>ns</marker>'
        "</xfa:data></xfa:datasets></xdp>"
    )
    elem, strategy = locate_data_section(root)
    assert strategy == "namespace"
    assert _marker(elem) == "ns"


def test_namespace_match_preferred_over_earlier_plain_data():
    root = parse_xml(
        "<root><wrap><data><marker>plain</marker></data></wrap>"
        f'<d:data xmlns:d="{XFA_NS}"><marker>ns</marker></d:data></root>'
    )
    elem, strategy = locate_data_section(root)
    assert strategy == "namespace"
    assert _marker(elem) == "ns"


def test_datasets_parent_without_namespace():
    root = parse_xml(
        "<xdp><datasets><data><marker>ds</marker></data></datasets></xdp>"
    )
    elem, strategy = locate_data_section(root)
    assert strategy == "datasets-parent"
    assert _marker(elem) == "ds"


def test_datasets_parent_with_wrong_namespace():
    root = parse_xml(
        '<x:datasets xmlns:x="urn:not-xfa"><x:data><marker>m</marker></x:data></x:datasets>'
    )
    elem, strategy = locate_data_section(root)
    assert strategy == "datasets-parent"
    assert _marker(elem) == "m"


def test_first_match_in_document_order_wins():
    root = parse_xml(
        "<xdp><datasets><data><marker>first</marker></data></datasets>"
        f'<d:data xmlns:d="{XFA_NS}"><marker>second</marker></d:data></xdp>'
    )
    elem, strategy = locate_data_section(root)
    assert strategy == "datasets-parent"
    assert _marker(elem) == "first"


def test_fallback_to_first_data_anywhere():
    root = parse_xml(
        "<root><a><data><marker>one</marker></data></a>"
        "<data><marker>two</marker></data></root>"
    )
    elem, strategy = locate_data_section(root)
    assert strategy == "fallback"
    assert _marker(elem) == "one"


def test_root_element_can_be_the_data_section():
    root = parse_xml("<data><marker>r</marker></data>")
    assert find_data_section(root) is root


def test_not_found():
    with pytest.raises(DataSectionNotFound):
        find_data_section(parse_xml("<root><datum/><dataset/></root>"))


def test_split_tag():
    assert split_tag("{urn:a}data") == ("urn:a", "data")
    assert split_tag("data") == ("", "data")
    assert local_name("{urn:a}data") == "data"


def test_iter_with_parent_document_order():
    root = parse_xml("<a><b><c/></b><d/></a>")
    pairs = [(e.tag, p.tag if p is not None else None) for e, p in iter_with_parent(root)]
    assert pairs == [("a", None), ("b", "a"), ("c", "b"), ("d", "a")]
