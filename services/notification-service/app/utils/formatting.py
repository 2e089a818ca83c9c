"""
Locale formatting helpers
Puerto Rico (es-PR) conventions for prices and timestamps
"""

from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CURRENCY_SYMBOL = "$"
GROUP_SEPARATOR = ","
DECIMAL_SEPARATOR = "."

# es-PR day periods, separated by a no-break space
AM_MARKER = "a.\u00a0m."
PM_MARKER = "p.\u00a0m."


def format_price(price: Union[int, float, Decimal]) -> str:
    """Format a price in US dollars, e.g. ``1234.5`` -> ``$1,234.50``"""
    value = Decimal(str(price))
    amount = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    # Sign follows the unrounded value
    sign = "-" if value.is_signed() else ""
    whole, cents = f"{abs(amount):.2f}".split(".")

    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)

    return f"{sign}{CURRENCY_SYMBOL}{GROUP_SEPARATOR.join(groups)}{DECIMAL_SEPARATOR}{cents}"


def format_timestamp(value: datetime) -> str:
    """
    Format a timestamp as ``MM/DD/YYYY, h:mm:ss a. m.``

    Aware values are converted to UTC, naive values are taken as UTC.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)

    hour = value.hour % 12 or 12
    marker = AM_MARKER if value.hour < 12 else PM_MARKER

    return (
        f"{value.month:02d}/{value.day:02d}/{value.year}, "
        f"{hour}:{value.minute:02d}:{value.second:02d} {marker}"
    )
