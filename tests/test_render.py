"""Test XFA output modes and the raw-XML fallback."""

import json

import pytest

from xfa_json.errors import EmptyResult, XmlParseError
from xfa_json.render import render_xfa
from xfa_json.settings import XfaMode

XML = "<data><_sys>Hidden</_sys><visible>Shown</visible></data>"


def test_off_produces_nothing():
    assert render_xfa(XML, XfaMode.OFF) is None


def test_raw_returns_input_unchanged():
    assert render_xfa(XML, XfaMode.RAW) == XML


def test_full_keeps_metadata():
    assert json.loads(render_xfa(XML, XfaMode.FULL)) == {
        "_sys": "Hidden",
        "visible": "Shown",
    }


def test_clean_is_default():
    assert json.loads(render_xfa(XML)) == {"visible": "Shown"}


def test_mode_accepts_plain_strings():
    assert json.loads(render_xfa(XML, "full"))["_sys"] == "Hidden"


def test_invalid_mode_rejected():
    with pytest.raises(ValueError):
        render_xfa(XML, "verbose")


def test_fallback_to_raw_on_parse_error():
    broken = "<data><a>1</b></data>"
    assert render_xfa(broken, XfaMode.CLEAN) == broken


def test_fallback_to_raw_on_empty_result():
    only_meta = "<data><_sys>x</_sys></data>"
    assert render_xfa(only_meta, XfaMode.CLEAN) == only_meta
    # the same document converts fine without filtering
    assert json.loads(render_xfa(only_meta, XfaMode.FULL)) == {"_sys": "x"}


def test_no_fallback_raises():
    with pytest.raises(XmlParseError):
        render_xfa("<data>", XfaMode.FULL, fallback_to_raw=False)
    with pytest.raises(EmptyResult):
        render_xfa("<data><_a>1</_a></data>", XfaMode.CLEAN, fallback_to_raw=False)


def test_indent_passed_through():
    assert render_xfa("<data><a>1</a></data>", XfaMode.FULL, indent=0) == '{\n"a": "1"\n}'
