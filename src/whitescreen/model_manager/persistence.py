"""JSON persistence for pydantic models.

Only the application configuration goes through here; session state
(current color, brightness, Kelvin) is never written to disk.

Writes are safe against crashes and mistakes: the previous file is
copied to ``<name>.bak`` and the new content lands via a temporary file
that is renamed over the target.
"""

import logging
import shutil
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from whitescreen.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless load and save helpers.

    Example:
        ```python
        config = PydanticPersistence.load_json_or_default(path, AppConfig)
        PydanticPersistence.save_json(config, path)
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read and validate ``path`` as ``model_type``.

        Raises:
            FileNotFoundError: If there is no file at ``path``
            ConfigFileInvalidError: If the file is empty, unreadable or not JSON
            ConfigValidationError: If a value fails validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {model_type.__name__} from {path}")
        return model

    @staticmethod
    def save_json(data: BaseModel, path: Path, backup: bool = True) -> None:
        """
        Write ``data`` to ``path`` as indented JSON, creating parent directories.

        Args:
            data: Model to save
            path: Destination file
            backup: Copy an existing file to ``<path>.bak`` first

        Raises:
            OSError: If the file cannot be written
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, path.with_suffix(path.suffix + ".bak"))
            logger.debug(f"Backed up {path}")

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(data.model_dump_json(indent=2), encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Could not save {type(data).__name__} to {path}: {e}")
            raise
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug(f"Saved {type(data).__name__} to {path}")

    @staticmethod
    def load_json_or_default(path: Path, model_type: type[M]) -> M:
        """
        Load ``path``, or return ``model_type()`` when the file does not exist.

        The default is not written to disk. A file that exists but is
        invalid still raises.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, using default {model_type.__name__}")
            return model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[M]) -> tuple[bool, str | None]:
        """Check a file without raising. Returns ``(is_valid, error_message)``."""
        try:
            PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except ConfigurationError as e:
            return False, e.get_full_message()
        return True, None
