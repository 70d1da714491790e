"""Color temperature to RGB conversion.

Approximates the color of a black-body radiator using Tanner Helland's
piecewise fit, evaluated on the temperature in hundreds of Kelvin
(``t = kelvin / 100``):

    red    t <= 66: 255
           t >  66: 329.698727446 * (t - 60) ** -0.1332047592
    green  t <= 66: 99.4708025861 * ln(t) - 161.1195681661
           t >  66: 288.1221695283 * (t - 60) ** -0.0755148492
    blue   t >= 66: 255
           t <= 19: 0
           else:    138.5177312231 * ln(t - 10) - 305.0447927307

Every channel is clamped to 0-255 after evaluation. The fit is meant for
roughly 1000K-40000K but the conversion is total: any input, including
zero, negative, NaN and infinite temperatures, yields a valid triple.
"""

import math

from whitescreen.utils import clamp

KELVIN_MIN = 1000
KELVIN_MAX = 40000
DEFAULT_KELVIN = 6500

# Boundary (in hundreds of Kelvin) between the low and high branches
_PIVOT = 66


def _red(t: float) -> int:
    if t <= _PIVOT:
        return 255
    return clamp(329.698727446 * math.pow(t - 60, -0.1332047592), 0, 255)


def _green(t: float) -> int:
    if t <= _PIVOT:
        if t <= 0:
            # ln(t) diverges to -inf
            return 0
        return clamp(99.4708025861 * math.log(t) - 161.1195681661, 0, 255)
    return clamp(288.1221695283 * math.pow(t - 60, -0.0755148492), 0, 255)


def _blue(t: float) -> int:
    if t >= _PIVOT:
        return 255
    if t <= 19:
        return 0
    return clamp(138.5177312231 * math.log(t - 10) - 305.0447927307, 0, 255)


def kelvin_to_rgb(kelvin: float) -> tuple[int, int, int]:
    """Convert a color temperature to an approximate RGB triple.

    Args:
        kelvin: Temperature in Kelvin (not bounded)

    Returns:
        Tuple of (red, green, blue), each an integer 0-255

    Examples:
        >>> kelvin_to_rgb(6500)
        (255, 254, 250)
        >>> kelvin_to_rgb(1000)
        (255, 68, 0)
    """
    try:
        t = kelvin / 100
    except OverflowError:
        # Integers too large for a float
        t = math.inf if kelvin > 0 else -math.inf
    if math.isnan(t):
        return (0, 0, 0)
    return (_red(t), _green(t), _blue(t))
