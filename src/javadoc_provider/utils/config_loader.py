"""Configuration loader for provider settings from YAML file."""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from javadoc_provider.config import DEFAULTS
from javadoc_provider.errors import ConfigurationError
from javadoc_provider.extractors.dialect import parse_generator_version


class ConfigLoader:
    """Load and manage configuration from YAML file.

    Example file::

        provider:
          docs_location: target/apidocs
          generator_version: "1.8"
          http_timeout: 10
          encoding: utf-8
        logging:
          level: INFO
          log_to_file: false
    """

    def __init__(self, config_path: str = DEFAULTS.CONFIG_FILE):
        """Initialize config loader.

        Args:
            config_path: Path to YAML configuration file

        Raises:
            ConfigurationError: If the file is missing or is not valid YAML
        """
        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            raise ConfigurationError(
                f"Config file not found: {self.config_path}",
                suggestions=["Check the --config path", f"Create {DEFAULTS.CONFIG_FILE}"],
                error_code="CONFIG_NOT_FOUND",
            )

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self.config_path}: {e}",
                suggestions=["Validate the YAML syntax"],
                error_code="CONFIG_INVALID",
            ) from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Config file {self.config_path} must contain a mapping",
                error_code="CONFIG_INVALID",
            )
        return config

    def get_provider_config(self) -> Dict[str, Any]:
        """Get documentation provider configuration.

        Returns:
            Dictionary with provider settings
        """
        return self.config.get('provider') or {}

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Dictionary with logging settings
        """
        return self.config.get('logging') or {}

    def get_docs_location(self) -> Optional[str]:
        """Get the JavaDoc location (directory, archive or URL)."""
        location = self.get_provider_config().get('docs_location')
        return str(location) if location else None

    def get_generator_version(self) -> Optional[str]:
        """Get the configured generator version, None to detect it."""
        version = self.get_provider_config().get('generator_version')
        return str(version) if version is not None else None

    def get_http_timeout(self) -> float:
        """Get the HTTP loader request timeout in seconds."""
        return float(self.get_provider_config().get('http_timeout', DEFAULTS.HTTP_TIMEOUT))

    def get_encoding(self) -> str:
        """Get the encoding of JavaDoc pages."""
        return self.get_provider_config().get('encoding', DEFAULTS.ENCODING)

    def get_log_level(self) -> str:
        """Get default log level."""
        return self.get_logging_config().get('level', DEFAULTS.LOG_LEVEL)

    def validate(self) -> Dict[str, Any]:
        """Validate configuration and return validation results.

        Returns:
            Dictionary with 'valid', 'errors' and 'warnings'
        """
        errors = []
        warnings = []

        if not self.get_docs_location():
            errors.append("provider.docs_location not specified")

        version = self.get_generator_version()
        if version is None:
            warnings.append("provider.generator_version not set, the local Java version will be used")
        elif parse_generator_version(version) is None:
            errors.append(f"provider.generator_version is not a version number: {version}")

        try:
            if self.get_http_timeout() <= 0:
                errors.append("provider.http_timeout must be positive")
        except (TypeError, ValueError):
            errors.append("provider.http_timeout must be a number")

        return {
            'valid': len(errors) == 0,
            'errors': errors,
            'warnings': warnings
        }

    def reload(self):
        """Reload configuration from file."""
        self.config = self._load_config()


# Global config loader instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader(config_path: str = DEFAULTS.CONFIG_FILE) -> ConfigLoader:
    """Get global config loader instance.

    Args:
        config_path: Path to configuration file

    Returns:
        ConfigLoader instance
    """
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader(config_path)
    return _config_loader


def reload_config():
    """Reload global configuration."""
    global _config_loader
    if _config_loader is not None:
        _config_loader.reload()
