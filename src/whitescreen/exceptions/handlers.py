"""
Helpers for turning low-level failures into whitescreen errors.

| Where | Helper |
|-------|--------|
| Config file fails pydantic validation | `wrap_pydantic_error(e, path)` |
| Export in the session service | `with ErrorContext("export 1920x1080 image"): ...` |
| CLI prints an error | `message, hint = format_error_for_display(e)` |
| CLI exports several sizes | `collector = collect_errors("export images")` |

Errors flow upwards: numpy, Pillow and pydantic raise ``MemoryError``,
``OSError`` or ``ValidationError``; the state, export and persistence
layers convert those to ``WhitescreenError`` subclasses; the CLI shows
``user_message`` and ``recovery_hint`` and leaves details to the log.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import WhitescreenError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the start, end or failure of an operation. Exceptions always propagate.

    Example:
        ```python
        with ErrorContext("export 1920x1080 image", logger_instance=logger):
            return exporter.export(1920, 1080)
        ```
    """

    def __init__(self, operation: str, logger_instance: Optional[logging.Logger] = None):
        self.operation = operation
        self.logger = logger_instance or logger

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
        elif isinstance(exc_val, WhitescreenError):
            # Already a domain error; its technical message has the detail
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return False


def _field_name(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "unknown"


def wrap_pydantic_error(error: ValidationError, file_path: str) -> WhitescreenError:
    """
    Convert a pydantic ``ValidationError`` from a config file.

    Broken JSON becomes ``ConfigFileInvalidError``; bad values become
    ``ConfigValidationError`` naming the field (or "multiple fields").
    """
    details = error.errors()

    json_errors = [d for d in details if d.get("type") == "json_invalid"]
    if json_errors:
        return ConfigFileInvalidError(file_path, json_errors[0].get("msg", str(error)))

    if len(details) == 1:
        detail = details[0]
        return ConfigValidationError(
            field=_field_name(detail),
            value=detail.get("input"),
            error_msg=detail.get("msg", "validation failed"),
            file_path=file_path,
        )

    lines = [f"  - {_field_name(d)}: {d.get('msg', 'validation failed')}" for d in details]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(details)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return ``(message, hint)`` for showing an error to the user."""
    if isinstance(error, WhitescreenError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """Start an ``ErrorCollector`` for a batch such as exporting several sizes."""
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Runs the steps of a batch, remembering failures instead of stopping.

    Example:
        ```python
        collector = collect_errors("export images")
        for width, height in sizes:
            with collector.try_operation(f"{width}x{height}"):
                exporter.export_to_file(output, width, height)
        if collector.has_errors:
            click.echo(collector.get_summary(), err=True)
        ```
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def try_operation(self, step: str) -> "_Step":
        """Context manager for one step; an exception in it is recorded and suppressed."""
        return _Step(self, step)

    def get_summary(self) -> str:
        """One line per failed step, or a success line."""
        if not self.errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        lines = [f"Failed {self.error_count} of {total} operations:"]
        for step, error in self.errors:
            message = error.user_message if isinstance(error, WhitescreenError) else str(error)
            lines.append(f"  - {step}: {message}")
        return "\n".join(lines)


class _Step:
    def __init__(self, collector: ErrorCollector, step: str):
        self.collector = collector
        self.step = step

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.collector.success_count += 1
            return False

        logger.warning(f"{self.collector.operation}: {self.step} failed: {exc_val}")
        self.collector.errors.append((self.step, exc_val))
        return True
