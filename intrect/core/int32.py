# Module: fixed-width signed 32-bit integer helpers.
# Main: INT32_MIN/INT32_MAX, wrap_i32, add_i32, clamp_i32, clip_double.
# Example: from intrect.core.int32 import wrap_i32, INT32_MAX

import math

INT32_BITS = 32
INT32_MASK = (1 << INT32_BITS) - 1
INT32_MIN = -(1 << (INT32_BITS - 1))
INT32_MAX = (1 << (INT32_BITS - 1)) - 1


def wrap_i32(value: int) -> int:
    """Narrow an integer the way a store into a 32-bit field does (two's complement)."""
    return ((int(value) - INT32_MIN) & INT32_MASK) + INT32_MIN


def add_i32(lhs: int, rhs: int) -> int:
    # machine addition: the sum wraps instead of growing
    return wrap_i32(lhs + rhs)


def clamp_low(value: int) -> int:
    return INT32_MIN if value < INT32_MIN else value


def clamp_high(value: int) -> int:
    return INT32_MAX if value > INT32_MAX else value


def clamp_i32(value: int) -> int:
    return clamp_high(clamp_low(value))


def clip_double(value: float, ceil: bool) -> int:
    """Clip a float into the int32 range; floor or ceil it when it fits.

    NaN has no integer counterpart and clips to 0.
    """
    if math.isnan(value):
        return 0
    if value <= INT32_MIN:
        return INT32_MIN
    if value >= INT32_MAX:
        return INT32_MAX
    return int(math.ceil(value) if ceil else math.floor(value))


def any_negative(*values: int) -> bool:
    return any(v < 0 for v in values)
