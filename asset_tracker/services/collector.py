"""Interactive prompt loop that turns typed answers into ``Asset`` objects.

The collector owns every bit of input validation: it keeps asking until a
date or price parses, so assets it builds are always well-formed. Reading and
writing go through plain callables, which lets tests feed scripted answers.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

import click

from ..core.asset_kinds import DONE_KEYWORD, AssetKind, normalize_kind
from ..core.parsing import DISPLAY_DATE_FORMAT, parse_price, parse_purchase_date
from ..models.asset import Asset

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

KIND_PROMPT = f"Add a new asset ({AssetKind.COMPUTER.value}/{AssetKind.PHONE.value}) or type '{DONE_KEYWORD}' to finish:"
KIND_RETRY_PROMPT = (
    f"Unknown asset type. Please enter {AssetKind.COMPUTER.value}, {AssetKind.PHONE.value} or '{DONE_KEYWORD}':"
)
BRAND_PROMPT = "Enter brand:"
MODEL_PROMPT = "Enter model:"
OFFICE_PROMPT = "Enter office location:"
DATE_PROMPT = f"Enter purchase date ({DISPLAY_DATE_FORMAT}):"
DATE_RETRY_PROMPT = f"Invalid date format. Please enter the purchase date ({DISPLAY_DATE_FORMAT}):"
PRICE_PROMPT = "Enter price in USD:"
PRICE_RETRY_PROMPT = "Invalid input. Please enter the price in USD:"


def _read_stdin() -> str:
    # Bytes the terminal encoding cannot decode arrive as lone surrogates.
    line = input()
    return line.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class InputCollector:
    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._read_line = read_line or _read_stdin
        self._write = write or click.echo

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line()

    def _ask_until(self, prompt: str, retry_prompt: str, parse: Callable[[str], Optional[T]]) -> T:
        value = parse(self._ask(prompt))
        while value is None:
            value = parse(self._ask(retry_prompt))
        return value

    def _ask_kind(self) -> Optional[AssetKind]:
        """Return the chosen kind, or ``None`` once the user types ``done``."""

        answer = self._ask(KIND_PROMPT)
        while True:
            if answer.strip().lower() == DONE_KEYWORD:
                return None
            kind = normalize_kind(answer)
            if kind is not None:
                return kind
            answer = self._ask(KIND_RETRY_PROMPT)

    def collect_one(self) -> Optional[Asset]:
        kind = self._ask_kind()
        if kind is None:
            return None
        brand = self._ask(BRAND_PROMPT)
        model = self._ask(MODEL_PROMPT)
        office = self._ask(OFFICE_PROMPT)
        purchase_date = self._ask_until(DATE_PROMPT, DATE_RETRY_PROMPT, parse_purchase_date)
        price_usd = self._ask_until(PRICE_PROMPT, PRICE_RETRY_PROMPT, parse_price)
        if price_usd < 0:
            LOGGER.warning(
                "Negative purchase price accepted",
                extra={"extra_data": {"brand": brand, "model": model, "price_usd": str(price_usd)}},
            )
        return Asset(
            kind=kind,
            brand=brand,
            model=model,
            office=office,
            purchase_date=purchase_date,
            price_usd=price_usd,
        )

    def collect(self) -> list[Asset]:
        """Prompt for assets until ``done`` or end of input."""

        assets: list[Asset] = []
        while True:
            try:
                asset = self.collect_one()
            except EOFError:
                # A record cut short by end of input is dropped.
                LOGGER.info("Input ended", extra={"extra_data": {"collected": len(assets)}})
                break
            if asset is None:
                break
            assets.append(asset)
            LOGGER.debug(
                "Asset collected",
                extra={"extra_data": {"kind": asset.kind.value, "office": asset.office, "currency": asset.currency}},
            )
        return assets


__all__ = ["InputCollector"]
