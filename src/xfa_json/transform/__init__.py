#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
XFA XML -> JSON transducer.

Only the entry points are re-exported here; the helpers live in their modules.
"""

from .xml_to_json import xfa_xml_to_dict, xfa_xml_to_json

__all__ = ["xfa_xml_to_dict", "xfa_xml_to_json"]
