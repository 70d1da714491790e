"""Observer protocol definitions for the light session.

- Presentation sinks: apply the computed color and brightness to a surface
- Light observers: refresh widgets after state changes
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from whitescreen.models import ColorState
    from whitescreen.rendering import RenderParams

from .events import LightEvent


@runtime_checkable
class PresentationSink(Protocol):
    """
    A display surface that shows the light.

    The core never draws anything itself; a window, a browser page or a
    test double implements this protocol and applies the parameters as a
    visual style.
    """

    def apply_render(self, params: "RenderParams") -> None:
        """
        Show the light with the given parameters.

        Args:
            params: Base color, brightness, overlay opacity and the
                resulting effective color
        """
        ...


@runtime_checkable
class LightObserver(Protocol):
    """
    Observer that receives light session events.

    Used by input widgets (hex display, RGB inputs, sliders) to resync
    with the state after any change, including changes they didn't make.
    """

    def on_light_event(self, event: LightEvent, state: "ColorState") -> None:
        """
        Handle a light session change.

        Args:
            event: What changed
            state: The state after the change (read only by convention)
        """
        ...
