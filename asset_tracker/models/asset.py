"""Beginner-friendly overview for this module.

WHAT: The ``Asset`` entity: one tracked computer or phone with its purchase
facts and the currency/price derived from its office.
WHEN: Built by the input collector for every record the user enters, then
read by the exporter and the table renderer.
WHY: Keeping the derived values next to the facts they come from means the
export and the on-screen table can never disagree.
HOW: A frozen pydantic model fixes the currency once in ``model_post_init``
and exposes each display column through an ordered ``COLUMNS`` tuple.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Callable, ClassVar, NamedTuple

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from ..core.asset_kinds import AssetKind, normalize_kind
from ..core.errors import FieldIndexError
from ..core.parsing import DATE_FORMAT
from ..services.currency import DEFAULT_POLICY, CurrencyPolicy

WHOLE_UNITS = Decimal("1")
RECORD_SEPARATOR = ","
# Blank second field in every exported record; kept for compatibility with
# files produced by earlier versions of the tracker.
RECORD_SPACER = " " * 10


def format_grouped(value: Decimal) -> str:
    """Render an amount as a whole number with ``,`` thousands separators."""

    # quantize needs room for every integer digit plus the rounding carry.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        rounded = value.quantize(WHOLE_UNITS, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        rounded = Decimal(0)
    return f"{rounded:,}"


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


class Asset(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    policy: ClassVar[CurrencyPolicy] = DEFAULT_POLICY

    kind: AssetKind
    brand: str
    model: str
    office: str
    purchase_date: date
    price_usd: Decimal

    _currency: str = PrivateAttr()

    @field_validator("kind", mode="before")
    @classmethod
    def coerce_kind(cls, value: Any) -> AssetKind:
        kind = normalize_kind(value) if isinstance(value, (str, AssetKind)) else None
        if kind is None:
            raise ValueError(f"kind must be one of {', '.join(k.value for k in AssetKind)}")
        return kind

    def model_post_init(self, __context: Any) -> None:
        super().__setattr__("_currency", self.policy.currency_for_office(self.office))

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_currency":
            raise AttributeError("currency is derived from office and cannot be reassigned")
        super().__setattr__(name, value)

    @property
    def currency(self) -> str:
        return self._currency

    def local_price(self) -> Decimal:
        """Purchase price converted into the office currency. Not cached."""

        return self.policy.convert(self.price_usd, self.currency)

    def field_at(self, index: int) -> str:
        if not 0 <= index < len(COLUMNS):
            raise FieldIndexError(index, len(COLUMNS))
        return COLUMNS[index].extract(self)

    def fields(self) -> list[str]:
        return [column.extract(self) for column in COLUMNS]

    def to_record(self) -> str:
        values = self.fields()
        return RECORD_SEPARATOR.join([values[0], RECORD_SPACER, *values[1:]])


class Column(NamedTuple):
    label: str
    extract: Callable[[Asset], str]


# Display order of every column. Extending the table means adding an entry here;
# headers, widths, rows and export records all follow from this tuple.
COLUMNS: tuple[Column, ...] = (
    Column("Type", lambda asset: asset.kind.value),
    Column("Brand", lambda asset: asset.brand),
    Column("Model", lambda asset: asset.model),
    Column("Office", lambda asset: asset.office),
    Column("Purchase Date", lambda asset: format_date(asset.purchase_date)),
    Column("Price in USD", lambda asset: format_grouped(asset.price_usd)),
    Column("Currency", lambda asset: asset.currency),
    Column("Local price today", lambda asset: format_grouped(asset.local_price())),
)


__all__ = [
    "Asset",
    "COLUMNS",
    "Column",
    "RECORD_SPACER",
    "format_date",
    "format_grouped",
]
