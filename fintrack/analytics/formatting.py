"""Number formatting shared by goal feedback, insights and the app."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[Decimal, int, float]


def format_amount(value: Number, places: int = 2) -> str:
    """Fixed-point rendering with half-up rounding, no grouping."""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.{places}f}"


def format_currency(value: Number, symbol: str = "₹", places: int = 2) -> str:
    """Amount with a currency symbol and thousands separators."""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{places}f}"


def format_percent(value: Number, places: int = 1) -> str:
    return f"{format_amount(value, places)}%"
