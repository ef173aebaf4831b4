import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from asset_tracker.core.asset_kinds import AssetKind
from asset_tracker.models.asset import Asset


def make_asset(
    kind=AssetKind.COMPUTER,
    brand="Dell",
    model="XPS",
    office="Sweden",
    purchase_date=date(2023, 1, 1),
    price_usd=Decimal("1000"),
) -> Asset:
    return Asset(
        kind=kind,
        brand=brand,
        model=model,
        office=office,
        purchase_date=purchase_date,
        price_usd=price_usd,
    )


@pytest.fixture()
def sweden_computer() -> Asset:
    return make_asset()


@pytest.fixture()
def usa_phone() -> Asset:
    return make_asset(
        kind=AssetKind.PHONE,
        brand="Apple",
        model="iPhone",
        office="USA",
        purchase_date=date(2023, 6, 15),
        price_usd=Decimal("800"),
    )


def scripted(*answers):
    """Return a read_line callable that replays ``answers`` then signals EOF."""

    queue = list(answers)

    def read_line() -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read_line
