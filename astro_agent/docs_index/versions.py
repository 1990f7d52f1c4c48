"""Astro version parsing and docs ref resolution."""

import re
from typing import Optional


# Astro 4 and earlier are documented on the v4 branch of the docs repo,
# everything newer lives on main.
DEFAULT_LEGACY_MAX_MAJOR = 4
DEFAULT_LEGACY_REF = "v4"
DEFAULT_MAINLINE_REF = "main"


def parse_major_version(value: str) -> Optional[int]:
    """
    Extract the major version from a version or range string.

    Handles plain versions ("5.1.0", "v4"), npm ranges ("^4.2.0", ">=5")
    and wildcards ("4.x", "5.*").

    Args:
        value: Raw version string, e.g. from package.json

    Returns:
        Major version number, or None if the string is not recognized
    """
    cleaned = value.strip().lower()
    if cleaned.startswith("v"):
        cleaned = cleaned[1:]

    if cleaned.endswith(".x") or cleaned.endswith(".*"):
        major = cleaned.split(".", 1)[0]
        return int(major) if re.fullmatch(r"[0-9]+", major) else None

    match = re.search(r"([0-9]+)", cleaned)
    if not match:
        return None
    return int(match.group(1))


def resolve_docs_ref(
    major: int,
    legacy_max_major: int = DEFAULT_LEGACY_MAX_MAJOR,
    legacy_ref: str = DEFAULT_LEGACY_REF,
    mainline_ref: str = DEFAULT_MAINLINE_REF,
) -> Optional[str]:
    """
    Map an Astro major version to a docs repo ref.

    Args:
        major: Astro major version
        legacy_max_major: Highest major version served by the legacy ref
        legacy_ref: Branch holding docs for older majors
        mainline_ref: Branch holding docs for current majors

    Returns:
        Ref name, or None if major is not a positive integer
    """
    if isinstance(major, bool) or not isinstance(major, int) or major < 1:
        return None
    if major <= legacy_max_major:
        return legacy_ref
    return mainline_ref
