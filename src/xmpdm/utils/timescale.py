"""Rational time scale parsing."""

from fractions import Fraction


def parse_time_scale(value: str | None) -> Fraction | None:
    """Parse an XMP time scale into seconds per unit.

    Args:
        value: Scale such as "1/24000", "1001/30000" or "0.04"

    Returns:
        Seconds per unit as a Fraction, or None if unparseable or not positive
    """
    if value is None:
        return None
    try:
        scale = Fraction(value.strip())
    except (ValueError, ZeroDivisionError):
        return None
    if scale <= 0:
        return None
    return scale
