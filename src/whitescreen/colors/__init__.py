"""Color model conversions.

Two pure conversions feed the color state:

- `codec`: ``#RRGGBB`` text <-> ``(r, g, b)`` channels
- `kelvin`: color temperature -> ``(r, g, b)`` channels

Kelvin -> RGB is one-directional. There is no RGB -> Kelvin inverse, so
setting a color from hex or RGB never changes the stored temperature.

Example:
    ```python
    from whitescreen.colors import decode_hex, encode_hex, kelvin_to_rgb

    encode_hex(*kelvin_to_rgb(2700))   # '#FFA757'
    decode_hex("#ffa757")              # (255, 167, 87)
    ```
"""

from .codec import decode_hex, encode_hex, normalize_hex
from .kelvin import DEFAULT_KELVIN, KELVIN_MAX, KELVIN_MIN, kelvin_to_rgb

__all__ = [
    "DEFAULT_KELVIN",
    "KELVIN_MAX",
    "KELVIN_MIN",
    "decode_hex",
    "encode_hex",
    "kelvin_to_rgb",
    "normalize_hex",
]
