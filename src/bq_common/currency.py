"""Display formatting for currency amounts.

Stored values keep full float precision; only the human-readable text is
rounded (two decimals, half-up, no grouping separator by default).
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def format_currency(value: float, places: int = 2, rounding: str = ROUND_HALF_UP) -> str:
    """Format a float with a fixed number of decimals: 9.945 -> '9.95', 1000 -> '1000.00'.

    Raises ValueError for inf/nan, which have no decimal form.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite amount: {value!r}")
    # repr() gives the shortest round-tripping literal, so 2.675 rounds as written
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(repr(value)).quantize(quantum, rounding=rounding))
