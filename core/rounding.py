"""Shared rounding rule for every grade value."""

from decimal import Decimal, ROUND_HALF_UP, localcontext

# Enough digits for any finite float (max ~1.8e308) plus the two decimals
_PRECISION = 320


def round2(value: float) -> float:
    """Rounds half-up to 2 decimals, e.g. 16.805 -> 16.81."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
