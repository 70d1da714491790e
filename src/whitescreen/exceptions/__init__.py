"""
Custom exception hierarchy for whitescreen.

## Exception Hierarchy

```
WhitescreenError (base)
├── ColorError
│   ├── InvalidColorFormatError
│   ├── InvalidInputTabError
│   └── UnknownSwatchError
├── ExportError
│   ├── InvalidDimensionsError
│   └── ExportFailedError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `WhitescreenError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

Out-of-range numbers (RGB channels, brightness) are never errors: they
are clamped where they enter the state.

### Example: Malformed Hex Color

```python
from whitescreen.exceptions import InvalidColorFormatError

try:
    state.set_color("zzzzzz")
except InvalidColorFormatError as e:
    # state is unchanged
    notify(e.get_full_message())
```

See `whitescreen.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import WhitescreenError
from .color import ColorError, InvalidColorFormatError, InvalidInputTabError, UnknownSwatchError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .export import ExportError, ExportFailedError, InvalidDimensionsError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    # Color
    "ColorError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    "ErrorCollector",
    "ErrorContext",
    # Export
    "ExportError",
    "ExportFailedError",
    "InvalidColorFormatError",
    "InvalidDimensionsError",
    "InvalidInputTabError",
    "UnknownSwatchError",
    # Base
    "WhitescreenError",
    # Handlers
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
