"""Observer list shared by services that broadcast changes."""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Registered observers of one kind, notified by callback name.

    Registration may happen from any thread. ``notify`` iterates over a
    copy taken under the lock, so a callback may register or unregister
    observers (including itself). A callback that raises is logged and
    the remaining observers are still called.

    Example:
        ```python
        sinks = ObserverManager[PresentationSink](observer_type_name="sink")
        sinks.register(window)
        sinks.notify("apply_render", params)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Args:
            observer_type_name: Label used in log messages (e.g. "light", "sink")
        """
        self._observers: list[T] = []
        self._lock = Lock()
        self._kind = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer. Registering the same observer twice has no effect."""
        with self._lock:
            if observer in self._observers:
                return
            self._observers.append(observer)
        logger.info(f"Registered {self._kind} observer: {observer}")

    def unregister(self, observer: T) -> None:
        """Remove an observer; unknown observers are logged and ignored."""
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.warning(f"Attempted to unregister unknown {self._kind} observer: {observer}")
                return
        logger.debug(f"Unregistered {self._kind} observer: {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call ``callback_name(*args, **kwargs)`` on every registered observer."""
        with self._lock:
            snapshot = tuple(self._observers)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._kind} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )
