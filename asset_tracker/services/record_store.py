"""Flat-file export of the asset collection.

Records are written one per line in the order the user entered them. The
display ordering used by the table does not apply here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO

from pydantic import BaseModel

from ..models.asset import Asset

LOGGER = logging.getLogger(__name__)

EXPORT_HEADER = "Type,Brand,Model,Office,Purchase Date,Price in USD,Currency,Local Price"
EXPORT_ENCODING = "utf-8"


class ExportResult(BaseModel):
    path: Path
    ok: bool
    records: int = 0
    error: Optional[str] = None


def write_records(assets: Iterable[Asset], stream: TextIO) -> int:
    """Write the header and one record per asset; returns the record count."""

    stream.write(EXPORT_HEADER + "\n")
    count = 0
    for asset in assets:
        stream.write(asset.to_record() + "\n")
        count += 1
    return count


def export_assets(assets: Iterable[Asset], path: Path | str) -> ExportResult:
    """Write ``assets`` to ``path``; write errors come back in the result."""

    target = Path(path)
    try:
        with target.open("w", encoding=EXPORT_ENCODING, newline="") as stream:
            count = write_records(assets, stream)
    except (OSError, UnicodeError, ValueError) as exc:
        LOGGER.exception(
            "Asset export failed",
            extra={"extra_data": {"path": str(target)}},
        )
        return ExportResult(path=target, ok=False, error=str(exc))

    LOGGER.info(
        "Assets exported",
        extra={"extra_data": {"path": str(target), "records": count}},
    )
    return ExportResult(path=target, ok=True, records=count)


__all__ = ["EXPORT_HEADER", "ExportResult", "export_assets", "write_records"]
