"""Shared floating-point tolerance policy.

Every approximate comparison in the tracer goes through this module so that
parallel-ray checks, cap-boundary checks and tuple equality agree on a
single epsilon.
"""

import math

EPSILON = 1e-4


def equal(a: float, b: float) -> bool:
    """Return True when a and b differ by less than EPSILON.

    Infinities only compare equal to an infinity of the same sign.
    """
    if math.isinf(a) or math.isinf(b):
        return a == b
    return abs(a - b) < EPSILON


def near_zero(x: float) -> bool:
    """Return True when |x| is below EPSILON."""
    return abs(x) < EPSILON
