"""Focused constants organization for the JavaDoc provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class JavaDocMarkers:
    """Literal markers shared by every generator version."""
    CLASS_QUALIFIER: str = "Class"
    INTERFACE_QUALIFIER: str = "Interface"
    METHOD_SUMMARY: str = "Method Summary"
    PARAMETERS: str = "Parameters:"
    RETURNS: str = "Returns:"
    TEXT_BOUNDARY: str = "<"
    SIGNATURE_OPEN: str = "("
    SIGNATURE_CLOSE: str = ")"
    PARAMETER_SEPARATOR: str = ","
    PARAMETER_DASH: str = "-"
    RESOURCE_SUFFIX: str = ".html"


@dataclass(frozen=True)
class GeneratorVersions:
    """JavaDoc generator version thresholds."""
    LEGACY: float = 1.6
    FALLBACK: str = "1.6"
    VERSION_PREFIX_LENGTH: int = 3
    JAVA_VERSION_ENV: str = "JAVA_VERSION"
    JAVA_BINARY: str = "java"
    DETECTION_TIMEOUT: float = 5.0


@dataclass(frozen=True)
class ApplicationDefaults:
    """Default configuration values."""
    CONFIG_FILE: str = "config/config.yaml"
    HTTP_TIMEOUT: float = 10.0
    ENCODING: str = "utf-8"
    LOG_LEVEL: str = "INFO"
    ROUTING_ANNOTATION: str = "Path"


@dataclass(frozen=True)
class ApplicationMetadata:
    """Application metadata and system constants."""
    VERSION: str = "javadoc-provider 1.0.0"
    EXIT_SUCCESS: int = 0
    EXIT_FAILURE: int = 1


# Singleton instances for easy access
MARKERS = JavaDocMarkers()
VERSIONS = GeneratorVersions()
DEFAULTS = ApplicationDefaults()
APP = ApplicationMetadata()
