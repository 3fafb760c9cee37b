import math


def round_half_up(x: float) -> float:
    """Nearest integer, ties toward +infinity (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding, which disagrees with the
    reference figures on exact .5 cases. Non-finite values pass through.
    """
    if not math.isfinite(x):
        return x
    return math.floor(x + 0.5)


def round_to(x: float, digits: int) -> float:
    """round_half_up at a given number of decimal places."""
    scale = 10 ** digits
    return round_half_up(x * scale) / scale


def floor_zero(x: float) -> float:
    """max(0, x) that keeps NaN instead of turning it into 0."""
    if isinstance(x, float) and math.isnan(x):
        return x
    return max(0, x)
