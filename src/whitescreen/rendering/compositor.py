"""Brightness compositing.

Brightness dims the light the way a dimmer does: a black overlay with
opacity ``1 - brightness / 100`` is alpha-composited over the base color.
Every channel is multiplied by the same factor, so hue is preserved.

The same rule drives the live surface (via ``RenderParams``) and image
export, so an exported PNG matches what was on screen.
"""

from pydantic import BaseModel, ConfigDict, Field

from whitescreen.models import Color, ColorSnapshot, ColorState
from whitescreen.utils import clamp


class RenderParams(BaseModel):
    """What a presentation sink needs to draw the light surface.

    A sink can either fill with ``base_color`` and lay a black overlay of
    opacity ``overlay_alpha`` on top, or fill with ``effective_color``
    directly; both give the same pixels.
    """

    model_config = ConfigDict(frozen=True)

    base_color: Color
    brightness: int = Field(ge=0, le=100)
    overlay_alpha: float = Field(ge=0.0, le=1.0)
    effective_color: Color

    @property
    def base_hex(self) -> str:
        """Base color as ``#RRGGBB``."""
        return self.base_color.to_hex()

    @property
    def effective_hex(self) -> str:
        """Composited color as ``#RRGGBB``."""
        return self.effective_color.to_hex()


def overlay_alpha(brightness: float) -> float:
    """Opacity of the black overlay for a brightness percent.

    Examples:
        >>> overlay_alpha(100)
        0.0
        >>> overlay_alpha(25)
        0.75
    """
    return 1 - clamp(brightness, 0, 100) / 100


def composite_channel(value: int, alpha: float) -> int:
    """Composite black at ``alpha`` over one channel value."""
    return clamp(value * (1 - alpha) + 0 * alpha, 0, 255)


def composite(color: Color, brightness: float) -> Color:
    """
    Effective displayed color of ``color`` at ``brightness`` percent.

    Brightness 100 returns the base color unchanged and 0 returns black.

    Examples:
        >>> composite(Color(r=255, g=0, b=0), 50)
        Color(r=128, g=0, b=0)
    """
    alpha = overlay_alpha(brightness)
    if alpha == 0:
        return color
    return Color(
        r=composite_channel(color.r, alpha),
        g=composite_channel(color.g, alpha),
        b=composite_channel(color.b, alpha),
    )


def render_params(state: ColorState | ColorSnapshot) -> RenderParams:
    """Build the render parameters for the current state."""
    return RenderParams(
        base_color=state.color,
        brightness=state.brightness,
        overlay_alpha=overlay_alpha(state.brightness),
        effective_color=composite(state.color, state.brightness),
    )
