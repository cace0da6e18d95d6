from fractions import Fraction

import math

Number = int | float | Fraction


def scalar_to_string(
    x: Number, use_fractions: bool = True, round_digits: int = 4, denom_limit: int = 1000
) -> str:
    """Convert a scalar to a string."""
    if math.isnan(float(x)):
        return "nan"
    if math.isinf(float(x)):
        return "inf" if x > 0 else "-inf"
    if use_fractions:
        return str(Fraction(x).limit_denominator(denom_limit))
    else:
        return str(round(float(x), round_digits))
