"""
asset_tracker.cli

Purpose:
  Collect hardware assets interactively, export them to a flat file and print
  a lifecycle colour-coded table.
  - Rows due to retire within 90 days print red, within 180 days yellow.
  - The table is still printed when the export file cannot be written.

Settings precedence:
  1) CLI flags (--output, --no-color, -v)
  2) environment / .env (EXPORT_PATH, COLOR, LOG_LEVEL, LOG_FORMAT)
  3) built-in defaults (assets.csv, colour on, WARNING)

Examples:
  python -m asset_tracker
  python -m asset_tracker --output /tmp/assets.csv --no-color
  EXPORT_PATH=inventory.csv asset-tracker -v

Exit codes:
  0 = success (also when only the export failed)
  1 = unexpected application error
  130 = interrupted
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence

import click

from .core.config import get_settings
from .core.logging import configure_logging
from .models.asset import Asset
from .services.collector import InputCollector
from .services.record_store import export_assets
from .services.table import LIFECYCLE_COLORS, AssetTable, render_table

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Track company computers and phones; export and display them.")
    p.add_argument("-o", "--output", type=Path, default=None,
                   help="Export file path (default: EXPORT_PATH setting, assets.csv).")
    p.add_argument("--no-color", action="store_true",
                   help="Print the table without lifecycle colours.")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Verbose logging to stderr.")
    return p.parse_args(argv)


def echo_table(table: AssetTable, echo: Callable[..., None] = click.echo, color: bool = True) -> None:
    echo(table.header)
    echo(table.underline)
    for row in table.rows:
        if color:
            echo(click.style(row.text, fg=LIFECYCLE_COLORS[row.lifecycle]))
        else:
            echo(row.text)


def run(
    collector: InputCollector,
    export_path: Path,
    now: Optional[datetime] = None,
    echo: Callable[..., None] = click.echo,
    color: bool = True,
) -> list[Asset]:
    """Collect, export, then render. Returns the collected assets."""

    assets = collector.collect()

    result = export_assets(assets, export_path)
    if result.ok:
        echo(f"Assets saved to {result.path}")
    else:
        echo(f"An error occurred while saving the file: {result.error}")

    table = render_table(assets, now or datetime.now())
    echo_table(table, echo=echo, color=color)
    return assets


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else settings.LOG_LEVEL, settings.LOG_FORMAT)

    export_path = args.output or settings.EXPORT_PATH
    color = settings.COLOR and not args.no_color

    try:
        run(InputCollector(), export_path, color=color)
        return 0
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        LOGGER.exception("Asset tracker failed")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
