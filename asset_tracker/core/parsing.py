"""Parsing helpers for the text typed at the interactive prompts.

Each helper returns ``None`` instead of raising when the text cannot be used,
so the caller can simply ask again.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

__all__ = ["DATE_FORMAT", "DISPLAY_DATE_FORMAT", "parse_price", "parse_purchase_date"]

# strptime accepts single-digit months/days, so the shape is checked first.
DATE_FORMAT = "%m/%d/%Y"
DISPLAY_DATE_FORMAT = "MM/dd/yyyy"
_DATE_SHAPE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")


def parse_purchase_date(raw: str | None) -> date | None:
    """Parse ``MM/dd/yyyy`` text into a calendar date."""

    if raw is None:
        return None
    cleaned = raw.strip()
    if not _DATE_SHAPE_RE.fullmatch(cleaned):
        return None
    try:
        return datetime.strptime(cleaned, DATE_FORMAT).date()
    except ValueError:
        return None


def parse_price(raw: str | None) -> Decimal | None:
    """Best-effort conversion of a typed USD price to ``Decimal``.

    Currency symbols and thousands separators are ignored. Empty text, words
    and non-finite values (``NaN``, ``Infinity``) are rejected.
    """

    if raw is None:
        return None
    cleaned = raw.strip().replace("$", "").replace(",", "")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value
