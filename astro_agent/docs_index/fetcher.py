"""Documentation fetching.

Pulls a shallow copy of the Astro docs repository at a given ref
and swaps it into the project's docs directory.
"""

import logging
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from .models import FetchResult

logger = logging.getLogger(__name__)

DOCS_REPO_URL = "https://github.com/withastro/docs.git"

# Substrings in git's stderr that mean the ref does not exist remotely
_MISSING_REF_MARKERS = ("not found", "did not match")


class DocsFetcher(ABC):
    """Abstract source of documentation trees."""

    @abstractmethod
    def fetch(self, ref: str, destination: Path) -> FetchResult:
        """
        Fetch the docs tree for a ref into destination.

        Args:
            ref: Branch, tag or commit-ish to fetch
            destination: Directory that will hold the docs

        Returns:
            FetchResult describing success or the failure reason
        """
        pass


class GitDocsFetcher(DocsFetcher):
    """Fetches docs with a shallow, single-branch git clone."""

    def __init__(self, repo_url: str = DOCS_REPO_URL, timeout: Optional[int] = None):
        """
        Initialize git fetcher.

        Args:
            repo_url: Remote documentation repository
            timeout: Optional clone timeout in seconds
        """
        self.repo_url = repo_url
        self.timeout = timeout

    def fetch(self, ref: str, destination: Path) -> FetchResult:
        destination = Path(destination)

        with tempfile.TemporaryDirectory(prefix="astro-agent-") as staging:
            error = self._clone(ref, Path(staging))
            if error:
                logger.error("Fetching docs for %s failed: %s", ref, error)
                return FetchResult(success=False, error=error)

            # Not crash-safe: the old tree is gone before the copy completes
            if destination.exists():
                shutil.rmtree(destination)
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copytree(staging, destination, ignore=shutil.ignore_patterns(".git"))

        logger.info("Docs for %s copied to %s", ref, destination)
        return FetchResult(success=True)

    def _clone(self, ref: str, staging: Path) -> Optional[str]:
        """Clone ref into staging. Returns an error message on failure."""
        command = [
            "git", "clone",
            "--depth", "1",
            "--single-branch",
            "--branch", ref,
            self.repo_url,
            ".",
        ]
        logger.debug("Running %s in %s", " ".join(command), staging)

        try:
            subprocess.run(
                command,
                cwd=str(staging),
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            output = f"{e.stderr or ''}{e.stdout or ''}".strip()
            if any(marker in output for marker in _MISSING_REF_MARKERS):
                return f'Could not find documentation for ref "{ref}".'
            return output or f"git clone exited with code {e.returncode}"
        except subprocess.TimeoutExpired:
            return f"git clone timed out after {self.timeout} seconds"
        except FileNotFoundError:
            return "'git' command not found"

        return None


def pull_docs(
    ref: str,
    docs_path: Path,
    repo_url: str = DOCS_REPO_URL,
    timeout: Optional[int] = None,
) -> FetchResult:
    """Pull docs for ref into docs_path using git."""
    return GitDocsFetcher(repo_url=repo_url, timeout=timeout).fetch(ref, Path(docs_path))
