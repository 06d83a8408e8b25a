"""File reading utilities with error handling."""

from pathlib import Path
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def read_file(file_path: str, encoding: str = 'utf-8') -> Optional[str]:
    """Read file content with error handling.

    Args:
        file_path: Path to the file
        encoding: File encoding (default: utf-8)

    Returns:
        File content as string, or None if error occurs
    """
    try:
        path = Path(file_path)
        if not path.exists():
            logger.debug(f"File not found: {file_path}")
            return None

        if not path.is_file():
            logger.warning(f"Not a file: {file_path}")
            return None

        with open(path, 'r', encoding=encoding) as f:
            content = f.read()

        logger.debug(f"Successfully read {len(content)} characters from {file_path}")
        return content

    except UnicodeDecodeError as e:
        logger.warning(f"Encoding error reading {file_path}: {e}")
        return None
    except PermissionError as e:
        logger.warning(f"Permission denied reading {file_path}: {e}")
        return None
    except OSError as e:
        logger.warning(f"Unexpected error reading {file_path}: {e}")
        return None
