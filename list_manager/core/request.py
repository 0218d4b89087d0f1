# list_manager/core/request.py
"""
Turn raw request parameters (orderby / order / paged) into sort and page specs.

The view itself never reads request state; hosts call these helpers and
pass the resulting specs in.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

from list_manager.models.pagination import PageSpec
from list_manager.models.sorting import ASC, FALLBACK_FIELD, SortSpec

ORDERBY_PARAM = "orderby"
ORDER_PARAM = "order"
PAGE_PARAM = "paged"

_TAG_RE = re.compile(r"<[^>]*>?")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")


def sanitize_text(value: Any) -> str:
    """
    Clean a single-line text parameter

    Removes markup tags, percent-encoded octets and line breaks, collapses
    runs of whitespace and trims the result.
    """
    if value is None:
        return ""
    text = str(value)
    text = _TAG_RE.sub("", text)
    text = _OCTET_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def query(params: Mapping[str, Any], key: str) -> Optional[str]:
    """Sanitised parameter value, or None when absent or empty."""
    if key not in params:
        return None
    value = sanitize_text(params[key])
    return value or None


def sort_spec_from_request(
    params: Mapping[str, Any],
    default_field: str = FALLBACK_FIELD,
    default_order: str = ASC,
) -> SortSpec:
    orderby = query(params, ORDERBY_PARAM) or default_field
    order = query(params, ORDER_PARAM) or default_order
    return SortSpec(field=orderby, direction=order.lower())


def page_number_from_request(params: Mapping[str, Any]) -> int:
    """Requested page number; anything unreadable or below one is page 1."""
    raw = query(params, PAGE_PARAM)
    if raw is None:
        return 1
    try:
        number = int(raw)
    except ValueError:
        return 1
    return max(1, number)


def page_spec_from_request(
    params: Mapping[str, Any],
    page_size: Optional[int] = None,
) -> PageSpec:
    return PageSpec(page_number=page_number_from_request(params), page_size=page_size)
