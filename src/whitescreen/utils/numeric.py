"""Numeric helpers shared by every color computation."""

import math


def clamp(value: float, minimum: int, maximum: int) -> int:
    """Constrain a value to ``[minimum, maximum]`` and round it to an integer.

    In-range values round half up (``127.5 -> 128``). The function is total:
    NaN maps to ``minimum`` and infinities map to the nearest bound, so a bad
    number can never leak into a color channel.

    Args:
        value: Any real number
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound

    Returns:
        Integer within the bounds

    Examples:
        >>> clamp(300, 0, 255)
        255
        >>> clamp(-10, 0, 255)
        0
        >>> clamp(127.5, 0, 255)
        128
    """
    # Compare before any float conversion; huge ints overflow math.isnan.
    # NaN fails both comparisons and falls through to minimum.
    if minimum <= value <= maximum:
        return math.floor(value + 0.5)
    if value > maximum:
        return maximum
    return minimum
