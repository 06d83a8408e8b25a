"""JavaDoc generator dialects and generator version detection."""

import os
import re
import subprocess
import logging
from typing import Optional

from javadoc_provider.config import VERSIONS
from javadoc_provider.data_models import TagDialect

logger = logging.getLogger(__name__)

_JAVA_VERSION_PATTERN = re.compile(r'version\s+"([^"]+)"')


LEGACY = TagDialect(
    name="legacy",
    class_info_tag="<P>",
    operation_info_tag="<DD>",
    operation_link='<A NAME="',
    response_marker="<DD>",
    code_tag="</CODE>",
)

MODERN = TagDialect(
    name="modern",
    class_info_tag='<div class="block">',
    operation_info_tag='<div class="block">',
    operation_link='<a name="',
    response_marker="<dd>",
    code_tag="</code>",
)


def parse_generator_version(version: Optional[str]) -> Optional[float]:
    """Reduce a free-form Java version string to its major.minor number.

    Only the leading three characters are considered, so "1.6.0_45" gives 1.6
    and "17.0.2" gives 17.0.

    Args:
        version: Version string such as "1.6", "1.8.0_292" or "11"

    Returns:
        Parsed version, or None if the string is not numeric
    """
    if not version:
        return None
    try:
        return float(version.strip()[:VERSIONS.VERSION_PREFIX_LENGTH])
    except ValueError:
        return None


def resolve_dialect(version_indicator: Optional[str]) -> TagDialect:
    """Select the marker dialect for a generator version.

    Args:
        version_indicator: Java version the documentation was built with

    Returns:
        LEGACY when the version is exactly the legacy threshold, MODERN otherwise
    """
    parsed = parse_generator_version(version_indicator)
    if parsed == VERSIONS.LEGACY:
        return LEGACY
    return MODERN


def detect_generator_version() -> str:
    """Detect the locally installed Java version.

    Looks at the JAVA_VERSION environment variable first, then asks the java
    binary. Falls back to the legacy version when neither yields a number.
    """
    env_version = os.environ.get(VERSIONS.JAVA_VERSION_ENV)
    if parse_generator_version(env_version) is not None:
        logger.debug(f"Using Java version from environment: {env_version}")
        return env_version.strip()

    try:
        result = subprocess.run(
            [VERSIONS.JAVA_BINARY, "-version"],
            capture_output=True,
            text=True,
            timeout=VERSIONS.DETECTION_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Java version detection failed: {e}")
        return VERSIONS.FALLBACK

    # java -version reports on stderr
    match = _JAVA_VERSION_PATTERN.search(result.stderr or result.stdout or "")
    if match and parse_generator_version(match.group(1)) is not None:
        logger.debug(f"Detected Java version {match.group(1)}")
        return match.group(1)

    logger.debug(f"Could not detect Java version, falling back to {VERSIONS.FALLBACK}")
    return VERSIONS.FALLBACK
