"""Heuristics that decide which converted fields are noise in clean output.

Both predicates are pure. Their pattern tables live in `xfa_json.constants`
and may be overridden per call (see `xfa_json.settings.FilterConfig`).
"""
from __future__ import annotations

from typing import Any, Iterable

from xfa_json.constants import LOOKUP_MIN_ITEMS, LOOKUP_PATTERNS, METADATA_PREFIXES


def is_metadata_field(name: str, prefixes: Iterable[str] = METADATA_PREFIXES) -> bool:
    """True if `name` starts with one of the (case-sensitive) system prefixes."""
    return any(name.startswith(p) for p in prefixes)


def is_lookup_list(
    name: str,
    value: Any,
    patterns: Iterable[str] = LOOKUP_PATTERNS,
    min_items: int = LOOKUP_MIN_ITEMS,
) -> bool:
    """True if `name` looks like an option list and `value` holds a long array.

    Only direct members of `value` are inspected: a dict with at least one
    list of more than `min_items` entries qualifies. Strings and lists never do.
    """
    if not any(p in name for p in patterns):
        return False

    if isinstance(value, dict):
        for v in value.values():
            if isinstance(v, list) and len(v) > min_items:
                return True

    return False
