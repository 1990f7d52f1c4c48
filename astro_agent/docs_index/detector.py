"""Astro version detection.

Reads the project's package.json to find which Astro major version
is installed, so the matching docs branch can be pulled without
asking the user.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .models import DetectResult
from .versions import parse_major_version

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"


class VersionDetector:
    """Detects the framework version declared in package.json."""

    def __init__(self, project_dir: str, package_name: str = "astro"):
        self.project_dir = Path(project_dir)
        self.package_name = package_name

    @property
    def display_name(self) -> str:
        """Package name as shown in messages."""
        return self.package_name.capitalize()

    def detect(self) -> DetectResult:
        """
        Detect the major version from package.json.

        Never raises: every failure is reported through the
        result's error field so callers can fall back to prompting.

        Returns:
            DetectResult with the major version or an error reason
        """
        manifest = self.project_dir / MANIFEST_FILE
        if not manifest.exists():
            return DetectResult(error="No package.json found in the current directory.")

        try:
            data = json.loads(manifest.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not parse %s: %s", manifest, e)
            return DetectResult(error=f"Failed to parse package.json: {e}")

        raw_version = self._find_dependency(data)
        if not raw_version:
            return DetectResult(
                error=f"{self.display_name} dependency not found in package.json."
            )

        major = parse_major_version(str(raw_version))
        if not major:
            return DetectResult(
                error=f"Unrecognized {self.display_name} version: {raw_version}"
            )

        logger.info("Detected %s %s (major %d)", self.package_name, raw_version, major)
        return DetectResult(version=major)

    def _find_dependency(self, data: Any) -> Any:
        """Look up the package in dependencies, then devDependencies."""
        if not isinstance(data, dict):
            return None

        for key in ("dependencies", "devDependencies"):
            deps: Dict[str, Any] = data.get(key) or {}
            if isinstance(deps, dict) and deps.get(self.package_name):
                return deps[self.package_name]
        return None


def detect_framework_version(project_dir: str, package_name: str = "astro") -> DetectResult:
    """Detect the framework major version for a project directory."""
    return VersionDetector(project_dir, package_name).detect()
