import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

CURRENCY_SYMBOL = "¥"  # yen


def _quantize(value: float, exp: str) -> Decimal:
    # Default context precision (28 digits) cannot hold very large floats
    d = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(d.as_tuple().digits) + 2)
        return d.quantize(Decimal(exp), rounding=ROUND_HALF_UP)


def format_currency(amount: float) -> str:
    """Whole yen with thousands separators: 1234.56 -> '¥1,235'.

    Ties round away from zero; negatives carry the sign before the symbol.
    """
    if math.isnan(amount):
        return f"{CURRENCY_SYMBOL}NaN"
    if math.isinf(amount):
        return f"{'-' if amount < 0 else ''}{CURRENCY_SYMBOL}∞"
    whole = int(_quantize(amount, "1"))
    sign = "-" if whole < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(whole):,}"


def format_percent(value: float) -> str:
    """One decimal place: 5 -> '5.0%', 5.678 -> '5.7%'."""
    if not math.isfinite(value):
        return f"{value}%"
    return f"{_quantize(value, '0.1')}%"
