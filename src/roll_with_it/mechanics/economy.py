"""Conversions between coin denominations, no I/O."""
from __future__ import annotations

import math

from roll_with_it.models.character import Currency, Denomination

# Value of one coin in gold pieces.
GOLD_RATES: dict[Denomination, float] = {
    Denomination.COPPER: 0.01,
    Denomination.SILVER: 0.1,
    Denomination.GOLD: 1,
    Denomination.PLATINUM: 10,
}

# Value of one coin in copper pieces, largest first.
_COPPER_VALUES: list[tuple[str, int]] = [("pp", 1000), ("gp", 100), ("sp", 10)]


def convert_to_base_currency(amount: float, denomination: Denomination | str) -> float:
    """Convert an amount of one coin type into gold pieces."""
    return amount * GOLD_RATES[Denomination.parse(denomination)]


def breakdown_from_base_currency(gold: float, platinum: bool = True) -> Currency:
    """Split a gold value into the fewest coins, largest denomination first.

    The value is first rounded to whole copper pieces, halves rounding up.
    With platinum=False everything above a gold piece stays in gold.
    """
    remaining = math.floor(gold * 100 + 0.5)
    coins: dict[str, int] = {}
    for field, value in _COPPER_VALUES:
        if field == "pp" and not platinum:
            coins[field] = 0
            continue
        coins[field] = remaining // value
        remaining -= coins[field] * value
    return Currency(cp=remaining, **coins)


def purse_value(currency: Currency) -> float:
    """Total worth of a purse in gold pieces."""
    return (
        currency.pp * 10
        + currency.gp
        + currency.sp / 10
        + currency.cp / 100
    )


def format_currency(amount: int | float, denomination: Denomination | str) -> str:
    return f"{amount:g} {Denomination.parse(denomination).value}"
