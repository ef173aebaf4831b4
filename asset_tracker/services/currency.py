"""Currency assignment and conversion for office locations.

Offices map to a display currency and every currency maps to a static rate
applied to the USD purchase price. Both lookups are total: anything the tables
do not know about falls back to US dollars at parity.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

DEFAULT_CURRENCY = "USD"
DEFAULT_RATE = Decimal("1.00")

# Office names are matched exactly (case-sensitive).
OFFICE_CURRENCIES: Mapping[str, str] = MappingProxyType(
    {
        "Europe": "EUR",
        "Spain": "EUR",
        "Sweden": "SEK",
        "USA": "USD",
    }
)

# Multiplier applied to a USD amount.
CURRENCY_RATES: Mapping[str, Decimal] = MappingProxyType(
    {
        "EUR": Decimal("0.92"),
        "SEK": Decimal("10.63"),
        "USD": Decimal("1.00"),
    }
)


class CurrencyPolicy:
    """Lookup tables shared by every asset kind."""

    def __init__(
        self,
        office_currencies: Mapping[str, str] = OFFICE_CURRENCIES,
        rates: Mapping[str, Decimal] = CURRENCY_RATES,
        default_currency: str = DEFAULT_CURRENCY,
        default_rate: Decimal = DEFAULT_RATE,
    ) -> None:
        self._office_currencies = dict(office_currencies)
        self._rates = dict(rates)
        self.default_currency = default_currency
        self.default_rate = default_rate

    def currency_for_office(self, office: str) -> str:
        return self._office_currencies.get(office, self.default_currency)

    def rate_for_currency(self, code: str) -> Decimal:
        return self._rates.get(code, self.default_rate)

    def convert(self, amount_usd: Decimal, code: str) -> Decimal:
        """Convert a USD amount into ``code`` using the static rate."""

        return amount_usd * self.rate_for_currency(code)


DEFAULT_POLICY = CurrencyPolicy()


def currency_for_office(office: str) -> str:
    return DEFAULT_POLICY.currency_for_office(office)


def rate_for_currency(code: str) -> Decimal:
    return DEFAULT_POLICY.rate_for_currency(code)


__all__ = [
    "CURRENCY_RATES",
    "CurrencyPolicy",
    "DEFAULT_CURRENCY",
    "DEFAULT_POLICY",
    "DEFAULT_RATE",
    "OFFICE_CURRENCIES",
    "currency_for_office",
    "rate_for_currency",
]
