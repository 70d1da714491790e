"""Protocol definitions for the light session observer patterns.

- Events: light session change events
- Observers: presentation sinks and light observers
"""

from .events import LightEvent
from .observers import LightObserver, PresentationSink

__all__ = [
    # Events
    "LightEvent",
    # Observers
    "LightObserver",
    "PresentationSink",
]
