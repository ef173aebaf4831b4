from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Iterable, Sequence

from pydantic import BaseModel

from ..models.asset import COLUMNS, Asset

LOGGER = logging.getLogger(__name__)

HEADERS: tuple[str, ...] = tuple(column.label for column in COLUMNS)
COLUMN_SEPARATOR = "  "
UNDERLINE_CHAR = "-"

LIFESPAN_YEARS = 3
CRITICAL_WINDOW = timedelta(days=90)
WARNING_WINDOW = timedelta(days=180)


class Lifecycle(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    FRESH = "fresh"


# Terminal colour per lifecycle class (click.style names).
LIFECYCLE_COLORS = {
    Lifecycle.CRITICAL: "red",
    Lifecycle.WARNING: "yellow",
    Lifecycle.FRESH: "white",
}


class TableRow(BaseModel):
    text: str
    lifecycle: Lifecycle


class AssetTable(BaseModel):
    header: str
    underline: str
    rows: list[TableRow]


def compute_column_widths(headers: Sequence[str], rows: Iterable[Asset]) -> list[int]:
    """Widest text per column across the headers and every asset."""

    if len(headers) != len(COLUMNS):
        raise ValueError(f"Expected {len(COLUMNS)} headers, got {len(headers)}")
    widths = [len(header) for header in headers]
    for asset in rows:
        for index in range(len(widths)):
            widths[index] = max(widths[index], len(asset.field_at(index)))
    return widths


def _join_cells(cells: Iterable[str], widths: Sequence[int]) -> str:
    return COLUMN_SEPARATOR.join(cell.ljust(width) for cell, width in zip(cells, widths))


def render_header_line(headers: Sequence[str], widths: Sequence[int]) -> str:
    return _join_cells(headers, widths)


def render_underline(widths: Sequence[int]) -> str:
    return COLUMN_SEPARATOR.join(UNDERLINE_CHAR * width for width in widths)


def render_row(asset: Asset, widths: Sequence[int]) -> str:
    return _join_cells(asset.fields(), widths)


def end_of_life(purchase_date: date) -> date:
    """Purchase date plus the lifespan; Feb 29 purchases retire on Feb 28."""

    target_year = purchase_date.year + LIFESPAN_YEARS
    try:
        return purchase_date.replace(year=target_year)
    except ValueError:
        return purchase_date.replace(year=target_year, day=28)


def lifecycle_class(asset: Asset, now: datetime) -> Lifecycle:
    eol = datetime.combine(end_of_life(asset.purchase_date), time.min, tzinfo=now.tzinfo)
    remaining = eol - now
    if remaining <= CRITICAL_WINDOW:
        return Lifecycle.CRITICAL
    if remaining <= WARNING_WINDOW:
        return Lifecycle.WARNING
    return Lifecycle.FRESH


def sort_for_display(assets: Iterable[Asset]) -> list[Asset]:
    # sorted() is stable, so equal (office, date) keys keep entry order.
    return sorted(assets, key=lambda asset: (asset.office, asset.purchase_date))


def render_table(assets: Sequence[Asset], now: datetime, headers: Sequence[str] = HEADERS) -> AssetTable:
    widths = compute_column_widths(headers, assets)
    rows = [
        TableRow(text=render_row(asset, widths), lifecycle=lifecycle_class(asset, now))
        for asset in sort_for_display(assets)
    ]
    LOGGER.debug(
        "Rendered asset table",
        extra={"extra_data": {"rows": len(rows), "widths": widths}},
    )
    return AssetTable(
        header=render_header_line(headers, widths),
        underline=render_underline(widths),
        rows=rows,
    )


__all__ = [
    "AssetTable",
    "HEADERS",
    "LIFECYCLE_COLORS",
    "Lifecycle",
    "TableRow",
    "compute_column_widths",
    "end_of_life",
    "lifecycle_class",
    "render_header_line",
    "render_row",
    "render_table",
    "render_underline",
    "sort_for_display",
]
