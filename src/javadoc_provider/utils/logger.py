"""Logging utility for the JavaDoc provider."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

_ROOT_LOGGER_NAME = "javadoc_provider"


class Logger:
    """Centralized logging utility."""

    _instance: Optional[logging.Logger] = None

    @classmethod
    def configure(cls, level: str = "INFO",
                  log_to_file: bool = False,
                  log_dir: str = "logs") -> logging.Logger:
        """Configure the package logger once.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_to_file: Whether to log to file
            log_dir: Directory for log files

        Returns:
            Configured package logger
        """
        if cls._instance is not None:
            return cls._instance

        logger = logging.getLogger(_ROOT_LOGGER_NAME)
        logger.setLevel(getattr(logging, level.upper()))

        # Clear existing handlers
        logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_to_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_path / f"javadoc_provider_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {log_file}")

        cls._instance = logger
        return logger

    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """Get a logger inside the package hierarchy.

        Args:
            name: Component name, e.g. 'DocumentationCache'

        Returns:
            Logger named 'javadoc_provider.<name>'
        """
        full_name = f"{_ROOT_LOGGER_NAME}.{name}" if name else _ROOT_LOGGER_NAME
        return logging.getLogger(full_name)

    @classmethod
    def reset(cls):
        """Reset the configured logger instance."""
        if cls._instance is not None:
            cls._instance.handlers.clear()
        cls._instance = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Convenience function to get logger.

    Args:
        name: Component name

    Returns:
        Logger instance
    """
    return Logger.get_logger(name)
