"""Light session service: owns the color state and pushes it to the display."""

import logging

from whitescreen.exceptions import ErrorContext
from whitescreen.models import AppConfig, ColorState, InputTab
from whitescreen.model_manager import ObserverManager
from whitescreen.protocols import LightEvent, LightObserver, PresentationSink
from whitescreen.rendering import ImageExporter, RenderParams, render_params
from whitescreen.utils import format_resolution

logger = logging.getLogger(__name__)


class LightService:
    """
    Owns one ColorState for an application session.

    Every input path (swatch click, hex picker, RGB inputs, Kelvin slider,
    brightness slider, tab switch) goes through a method here. After a
    successful change the service:

    1. Notifies LightObservers so widgets can resync
    2. Pushes fresh RenderParams to every PresentationSink

    A rejected input raises before anything is notified, and the state is
    unchanged.

    Threading:
        Mutations are expected on the UI thread. Observer registration is
        thread-safe (see ObserverManager).
    """

    def __init__(self, config: AppConfig, state: ColorState | None = None):
        """
        Initialize the light service.

        Args:
            config: Application configuration (defaults and swatches)
            state: Existing state to drive; built from config defaults if None
        """
        self.config = config
        self._state = state if state is not None else ColorState.from_config(config)

        self._observers = ObserverManager[LightObserver](observer_type_name="light")
        self._sinks = ObserverManager[PresentationSink](observer_type_name="sink")
        logger.info(f"LightService initialized ({self._state.hex} at {self._state.brightness}%)")

    @property
    def state(self) -> ColorState:
        """The session state."""
        return self._state

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: LightObserver) -> None:
        """Register an observer to receive light events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: LightObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    def register_sink(self, sink: PresentationSink) -> None:
        """
        Register a presentation sink.

        The sink immediately receives the current render parameters so it
        never shows a stale surface. If that first update raises, the sink
        is not registered.
        """
        sink.apply_render(self.render_params())
        self._sinks.register(sink)

    def unregister_sink(self, sink: PresentationSink) -> None:
        """Unregister a presentation sink."""
        self._sinks.unregister(sink)

    def _changed(self, event: LightEvent) -> None:
        self._observers.notify('on_light_event', event, self._state)
        if event is not LightEvent.TAB_CHANGED:
            self._sinks.notify('apply_render', self.render_params())

    # =================================================================
    # Inputs
    # =================================================================

    def set_color(self, hex_color: str) -> None:
        """
        Set the color from a hex string (picker input).

        Raises:
            InvalidColorFormatError: If the text is not a hex color
        """
        self._state.set_color(hex_color)
        self._changed(LightEvent.COLOR_CHANGED)

    def set_rgb(self, r: float, g: float, b: float) -> None:
        """Set the color from RGB channel inputs (clamped to 0-255)."""
        self._state.set_from_rgb_channels(r, g, b)
        self._changed(LightEvent.COLOR_CHANGED)

    def set_kelvin(self, kelvin: int | float) -> None:
        """Apply a color temperature."""
        self._state.set_kelvin(kelvin)
        self._changed(LightEvent.TEMPERATURE_CHANGED)

    def set_brightness(self, percent: float) -> None:
        """Set brightness (clamped to 0-100)."""
        self._state.set_brightness(percent)
        self._changed(LightEvent.BRIGHTNESS_CHANGED)

    def select_swatch(self, name: str) -> None:
        """
        Apply a swatch from the configured palette.

        Raises:
            UnknownSwatchError: If no swatch has that name
        """
        swatch = self.config.find_swatch(name)
        self.set_color(swatch.color)

    def set_active_tab(self, tab: InputTab | str) -> None:
        """
        Switch the active control tab.

        Raises:
            InvalidInputTabError: If the tab is unknown
        """
        self._state.set_active_tab(tab)
        self._changed(LightEvent.TAB_CHANGED)

    # =================================================================
    # Output
    # =================================================================

    def render_params(self) -> RenderParams:
        """Current render parameters."""
        return render_params(self._state)

    def export(self, width: int, height: int) -> bytes:
        """
        Export the current surface as PNG bytes.

        Raises:
            InvalidDimensionsError: If width or height is not a positive integer
            ExportFailedError: If the surface cannot be allocated or encoded
        """
        with ErrorContext(f"export {width}x{height} image", logger_instance=logger):
            return ImageExporter(self._state).export(width, height)

    @staticmethod
    def resolution_label(width: int, height: int) -> str:
        """Resolution display text, e.g. ``"1920 x 1080"``."""
        return format_resolution(width, height)
