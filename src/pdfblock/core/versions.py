# src/pdfblock/core/versions.py
"""Version string comparison.

Release segments are compared numerically, left to right, with missing
segments treated as zero, so "7.1" and "7.1.0" compare equal. Parsing is
delegated to packaging so that pre-release and local suffixes follow the
usual Python ordering rules instead of ad-hoc string splitting.

Host runtimes often report distribution-patched versions that are not
PEP 440, such as "8.1.2-1ubuntu2.14". Those compare by their leading
numeric release ("8.1.2").
"""

import re

from packaging.version import InvalidVersion, Version

# Dotted digits ending at the string end or a vendor separator.
_RELEASE_PREFIX = re.compile(r"(\d+(?:\.\d+)*)(?=$|[-+~_ ])")


class InvalidVersionError(ValueError):
    """Raised when a version string cannot be parsed."""


def parse_version(value: str) -> Version:
    """Parse a version string.

    Args:
        value: Dot-separated version, e.g. "3.18.3" or "8.1.2-1ubuntu2.14"

    Returns:
        Parsed Version

    Raises:
        InvalidVersionError: If neither the string nor its leading release
            segments form a valid version
    """
    try:
        value = value.strip()
        return Version(value)
    except InvalidVersion:
        match = _RELEASE_PREFIX.match(value)
        if match is None:
            raise InvalidVersionError(f"Invalid version string: {value!r}") from None
        return Version(match.group(1))
    except AttributeError as e:
        raise InvalidVersionError(f"Invalid version string: {value!r}") from e


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b
    """
    va = parse_version(a)
    vb = parse_version(b)
    if va < vb:
        return -1
    if va > vb:
        return 1
    return 0


def version_at_least(actual: str, minimum: str) -> bool:
    """Whether actual >= minimum."""
    return compare_versions(actual, minimum) >= 0
